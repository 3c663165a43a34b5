"""Command line interface for datekit."""
