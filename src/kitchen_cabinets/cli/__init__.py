"""Command-line interface for kitchen cabinet generation."""
