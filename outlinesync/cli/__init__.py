"""Command-line interface for outlinesync."""
