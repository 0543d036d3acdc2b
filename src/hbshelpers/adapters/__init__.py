"""Concrete collaborators used by the helpers."""
