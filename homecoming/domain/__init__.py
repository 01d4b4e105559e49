"""Domain constants for the tracked route."""

from .route import Route, default_route

__all__ = ["Route", "default_route"]
