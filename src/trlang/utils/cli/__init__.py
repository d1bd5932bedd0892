"""Command-line interface utilities."""
