"""Command-line interface for manifest-config."""
