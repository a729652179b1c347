"""Search Engine."""

from .session import BACKWARD, FORWARD, SearchAction, SearchMatch, SearchSession

__all__ = ["SearchSession", "SearchAction", "SearchMatch", "FORWARD", "BACKWARD"]
