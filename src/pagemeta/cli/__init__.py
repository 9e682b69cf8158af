"""Command-line interface for pagemeta."""
