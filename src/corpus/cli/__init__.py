"""Command-line interface for the corpus layout engine."""
