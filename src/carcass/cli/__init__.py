"""Command-line interface for the carcass geometry engine."""
