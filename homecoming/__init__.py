"""Homecoming flight tracker backend."""
