"""Command-line interface for includetree."""
