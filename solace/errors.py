"""Error taxonomy shared by the stores, the chat pipeline and the HTTP layer."""

from __future__ import annotations


class SolaceError(Exception):
    """Base class for every error raised by the companion core."""


class ValidationError(SolaceError):
    """Input was malformed or empty; the caller must resubmit."""


class NotFoundError(SolaceError):
    """A referenced identifier does not exist."""


class UpstreamError(SolaceError):
    """The text-completion service failed to produce a response."""
