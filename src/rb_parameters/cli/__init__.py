"""Command-line interface for rb-parameters."""
