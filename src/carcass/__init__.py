"""Parametric cabinet geometry engine."""

__version__ = "0.1.0"
