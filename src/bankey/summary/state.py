"""Load cycle state.

A summary screen is always in exactly one of these states; the loader
replaces the value wholesale on each transition::

    Idle -> Loading -> Loaded | Failed
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import LoadError
from .view_models import AccountSummaryViewModel, SummaryBundle


@dataclass(frozen=True)
class Idle:
    """No load has been started yet."""


@dataclass(frozen=True)
class Loading:
    """Both fetches are outstanding; render the placeholder rows."""

    placeholders: tuple[AccountSummaryViewModel, ...] = ()


@dataclass(frozen=True)
class Loaded:
    """Both fetches succeeded."""

    bundle: SummaryBundle


@dataclass(frozen=True)
class Failed:
    """At least one fetch failed; nothing from this cycle is rendered."""

    errors: tuple[LoadError, ...]


LoadResult = Idle | Loading | Loaded | Failed
