"""Infrastructure layer - exporters for derived design output."""
