"""Input/output helpers."""
