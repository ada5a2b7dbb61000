"""Command-line tools for the market dashboard."""
