"""Command line interface for the furniture engine."""
