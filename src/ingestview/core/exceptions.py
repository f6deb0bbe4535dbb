"""Custom exceptions for ingestview."""

NO_INDEX_MESSAGE = "Please select an index."
NOTHING_TO_INDEX_MESSAGE = "Nothing to index"


class IngestViewError(Exception):
    """Base exception for all ingestview errors."""

    pass


class IndexNotSelectedError(IngestViewError):
    """No target index has been selected."""

    def __init__(self) -> None:
        super().__init__(NO_INDEX_MESSAGE)


class ParseError(IngestViewError):
    """Document buffer is empty or not well-formed JSON."""

    pass


class GatewayError(IngestViewError):
    """Remote index service call failed."""

    def __init__(
        self,
        url: str,
        message: str,
        status_code: int | None = None,
        retryable: bool = False,
    ):
        """Initialize exception with request details.

        Args:
            url: URL of the failed request.
            message: Human-readable failure message shown to the operator.
            status_code: HTTP status code, or None for transport failures.
            retryable: Whether repeating the request may succeed.
        """
        self.url = url
        self.message = message
        self.status_code = status_code
        self.retryable = retryable
        super().__init__(message)
