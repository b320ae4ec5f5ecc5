from __future__ import annotations


class FeedError(Exception):
    """Base class for failures while pulling data from a provider."""


class FeedTransportError(FeedError):
    """The provider could not be reached or answered with an error status."""


class FeedFormatError(FeedError):
    """The payload was not valid JSON or did not have the expected shape."""


class ArchiveError(FeedError):
    """The GTFS archive was unreadable or lacked the requested entry."""
