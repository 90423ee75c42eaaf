"""Account summary — dual fetch join, load state and view models."""

from .errors import LoadError, title_and_message
from .loader import SummaryLoader
from .state import Failed, Idle, Loaded, Loading, LoadResult
from .view_models import AccountSummaryViewModel, HeaderViewModel, SummaryBundle

__all__ = [
    "AccountSummaryViewModel",
    "Failed",
    "HeaderViewModel",
    "Idle",
    "LoadError",
    "LoadResult",
    "Loaded",
    "Loading",
    "SummaryBundle",
    "SummaryLoader",
    "title_and_message",
]
