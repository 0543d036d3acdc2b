"""Bridges between the helper registry and template engines."""
