"""Command-line interface for Secretstack."""
