"""Command-line interface for planet visibility reports."""
