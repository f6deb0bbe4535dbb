"""Command line interface for ingestview."""
