"""Utility helpers for dewey2md."""
