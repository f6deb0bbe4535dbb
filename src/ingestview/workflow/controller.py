"""Ingestion workflow controller.

Mediates between the user-edited document buffer, the remote index gateway
and the transient status shown to the operator. Two actions are supported:

- ``generate_sample``: replace the buffer with a sample document from the
  selected index.
- ``index_documents``: parse the buffer and submit it for ingestion.

Every action runs ``Idle -> Validating -> {Idle(error) | Busy} -> Idle``.
The controller lives on a single event loop; the only suspension point is
the gateway call, so no locking is needed.
"""

from __future__ import annotations

from typing import Callable

from loguru import logger

from ..core.config import Config
from ..core.exceptions import GatewayError, IndexNotSelectedError, ParseError
from ..core.types import StatusView, WorkflowPhase, WorkflowState
from ..gateway.base import IndexGateway
from .documents import interpret_ingest_response, parse_document, render_document

COLLECTING_SAMPLE = "Collecting sample..."
PARSING = "Parsing..."

StatusListener = Callable[[StatusView], None]


class IngestionController:
    """Orchestrates the sample and ingest actions.

    The selected index is owned by the caller and pushed in through
    ``select_index``. The document buffer is shared with the editor, which
    writes it through ``set_document``.

    Example:

        async with HTTPIndexGateway(config.gateway) as gateway:
            controller = IngestionController(gateway, config, selected_index="products")
            await controller.mount()
            controller.set_document('{"name": "Widget"}')
            if await controller.index_documents():
                print(controller.state.ingest_result)
    """

    def __init__(
        self,
        gateway: IndexGateway,
        config: Config | None = None,
        selected_index: str | None = None,
        document: str | None = None,
    ):
        """Initialize the controller.

        Args:
            gateway: Remote index gateway.
            config: Application configuration.
            selected_index: Initially selected index.
            document: Initial buffer contents supplied by the caller.
        """
        self._gateway = gateway
        self._config = config or Config()
        self._selected_index = selected_index
        self._document = document
        self._state = WorkflowState()
        self._listeners: list[StatusListener] = []
        # Actions started but not yet resolved
        self._pending = 0
        # Token of the most recently started action
        self._generation = 0

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def status(self) -> StatusView:
        return self._state.status

    @property
    def selected_index(self) -> str | None:
        return self._selected_index

    @property
    def document(self) -> str | None:
        """Current contents of the document buffer."""
        return self._document

    def set_document(self, text: str | None) -> None:
        """Replace the buffer with text edited by the user."""
        self._document = text

    def subscribe(self, listener: StatusListener) -> Callable[[], None]:
        """Register a status listener.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def mount(self) -> None:
        """Reset the workflow state and seed an empty buffer with a sample."""
        # Responses to calls issued before mounting are stale
        self._generation += 1
        phase = WorkflowPhase.BUSY if self._pending else WorkflowPhase.IDLE
        self._set_state(WorkflowState(phase=phase))
        if not self._document:
            await self.generate_sample()

    async def select_index(self, index: str | None) -> None:
        """Reconcile a change of the externally selected index.

        A new sample is fetched only when the selection actually changed and
        the buffer holds no user content.
        """
        if index == self._selected_index:
            return
        logger.debug(f"Selected index changed: {self._selected_index!r} -> {index!r}")
        self._selected_index = index
        if not self._document:
            await self.generate_sample()

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def check_index(self) -> bool:
        """Check that an index is selected, recording an error if not."""
        if not self._selected_index:
            self._set_state(self._state.evolve(error=str(IndexNotSelectedError())))
            return False
        return True

    async def generate_sample(self) -> bool:
        """Replace the buffer with a sample document from the selected index.

        Returns:
            True if the buffer was replaced.
        """
        if not self.check_index():
            return False

        index = self._selected_index
        token = self._begin(COLLECTING_SAMPLE)
        logger.debug(f"Collecting sample from index {index!r}")

        try:
            sample = await self._gateway.fetch_sample(
                index, count=self._config.gateway.sample_count
            )
        except GatewayError as e:
            self._finish(token, task=None, error=e.message)
            return False
        except Exception as e:
            logger.exception(f"Sample request for {index!r} failed")
            self._finish(token, task=None, error=str(e) or type(e).__name__)
            return False

        if not self._is_current(token):
            self._finish(token)
            return False

        try:
            document = render_document(sample)
        except ValueError as e:
            logger.warning(f"Sample from {index!r} cannot be rendered: {e}")
            self._finish(token, task=None, error=str(e))
            return False

        self._document = document
        self._finish(token, task=None)
        return True

    async def index_documents(self) -> bool:
        """Parse the buffer and submit it to the selected index.

        Returns:
            True if the service accepted the documents.
        """
        if not self.check_index():
            return False

        index = self._selected_index
        token = self._begin(PARSING)

        try:
            payload = parse_document(self._document)
            normalized = render_document(payload)
        except (ParseError, ValueError) as e:
            logger.debug(f"Document buffer rejected: {e}")
            self._finish(token, task=None, error=str(e))
            return False

        self._document = normalized
        logger.debug(f"Submitting documents to index {index!r}")

        try:
            response = await self._gateway.ingest(
                index, payload, field_types=self._config.gateway.field_types
            )
        except GatewayError as e:
            self._finish(token, task=None, error=e.message)
            return False
        except Exception as e:
            logger.exception(f"Ingest request for {index!r} failed")
            self._finish(token, task=None, error=str(e) or type(e).__name__)
            return False

        if not self._is_current(token):
            self._finish(token)
            return False

        outcome = interpret_ingest_response(response)
        try:
            ingest_result = render_document(outcome.response)
        except ValueError as e:
            logger.warning(f"Response from {index!r} cannot be rendered: {e}")
            self._finish(token, task=None, error=str(e))
            return False

        logger.info(f"Index {index!r}: {outcome.label}")
        self._finish(token, task=outcome.label, ingest_result=ingest_result)
        return True

    # -------------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------------

    def _begin(self, task: str) -> int:
        self._pending += 1
        self._generation += 1
        self._set_state(
            self._state.evolve(
                phase=WorkflowPhase.BUSY,
                task=task,
                error=None,
                ingest_result=None,
            )
        )
        return self._generation

    def _is_current(self, token: int) -> bool:
        if not self._config.workflow.drop_stale_responses:
            return True
        if token != self._generation:
            logger.warning(
                f"Dropping stale response of action {token} "
                f"(latest is {self._generation})"
            )
            return False
        return True

    def _finish(self, token: int, **changes) -> None:
        """Resolve an action, applying changes unless it was superseded."""
        self._pending = max(self._pending - 1, 0)
        phase = WorkflowPhase.BUSY if self._pending else WorkflowPhase.IDLE
        if changes and not self._is_current(token):
            changes = {}
        self._set_state(self._state.evolve(phase=phase, **changes))

    def _set_state(self, state: WorkflowState) -> None:
        self._state = state
        view = state.status
        for listener in list(self._listeners):
            listener(view)
