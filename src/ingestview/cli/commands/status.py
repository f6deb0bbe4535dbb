"""Status command for ingestview CLI."""

from ...core.config import Config


def handle_status(args, config: Config) -> None:
    """Print the effective configuration.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    print("ingestview Configuration")
    print("=" * 50)
    print(f"Service URL: {config.gateway.base_url}")
    print(f"Timeout: {config.gateway.timeout}s")
    print(f"Default index: {config.default_index or '(none)'}")
    print(f"Sample count: {config.gateway.sample_count}")
    print(f"Field type inference: {'on' if config.gateway.field_types else 'off'}")
    print(f"Drop stale responses: {'on' if config.workflow.drop_stale_responses else 'off'}")
