"""Command-line interface for ttyask."""
