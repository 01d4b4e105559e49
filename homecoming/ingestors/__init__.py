"""Data ingestors for the Homecoming tracker."""

from .opensky import FeedFetchError, OpenSkyIngestor, parse_states

__all__ = ["FeedFetchError", "OpenSkyIngestor", "parse_states"]
