"""Command-line interface for Periodlog."""
