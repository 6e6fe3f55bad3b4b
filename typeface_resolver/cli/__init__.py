"""Command line interface for typeface-resolver."""
