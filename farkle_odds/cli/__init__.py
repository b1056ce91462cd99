"""Command-line interface for Farkle Odds."""
