"""REST API for the cabinet geometry engine."""
