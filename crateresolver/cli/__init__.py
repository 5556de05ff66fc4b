"""Command implementations for the crateresolver CLI."""
