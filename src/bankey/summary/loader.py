"""Summary loader — fetch profile and accounts concurrently, then join.

Both fetches start immediately and always run to completion; a fast
failure in one branch neither short-circuits nor cancels the other.
Only after both have reported does the loader publish a terminal state:

* both succeeded -> :class:`Loaded` with a fresh :class:`SummaryBundle`
* anything failed -> :class:`Failed`; partial data is discarded

Each failed branch notifies ``on_error`` as soon as it fails, so two
failures produce two notifications. ``on_complete`` fires exactly once per
cycle, after the join.

A service raising anything other than ``FetchError`` is a bug: the cycle
still waits for the other branch, publishes :class:`Failed` with whatever
kinds were collected (possibly none), fires ``on_complete``, then re-raises.
A service returning ``None`` counts as a ``DecodingError``.

Calling :meth:`SummaryLoader.load` again (a refresh) resets the state to
:class:`Loading` first. Overlapping refreshes are allowed; only the most
recent cycle publishes its outcome, older cycles just return theirs to
their own caller.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from loguru import logger

from bankey.core.exceptions import DecodingError, FetchError
from bankey.core.utils.join import JoinGroup
from bankey.financial.currency import CurrencyFormatter
from bankey.financial.models import Account, Profile
from bankey.services.base import AccountService, ProfileService

from .errors import LoadError, title_and_message
from .state import Failed, Idle, Loaded, Loading, LoadResult
from .view_models import HeaderViewModel, SummaryBundle, build_account_view_models

ErrorHandler = Callable[[LoadError, str, str], None]
"""Callback ``(error, title, message) -> None`` fired once per failed fetch."""

CompletionHandler = Callable[[LoadResult], None]
"""Callback ``(result) -> None`` fired once per load cycle, after the join."""


@dataclass
class _Cycle:
    """Results collected by one load cycle's two branches."""

    generation: int
    user_id: str
    profile: Profile | None = None
    accounts: list[Account] | None = None
    errors: dict[str, LoadError] = field(default_factory=dict)
    unexpected: list[BaseException] = field(default_factory=list)

    def ordered_errors(self) -> tuple[LoadError, ...]:
        """Branch errors, profile first."""
        return tuple(self.errors[b] for b in ("profile", "accounts") if b in self.errors)


class SummaryLoader:
    """Coordinates the profile and accounts fetches for the summary screen.

    Args:
        profile_service: Source of the user's profile.
        account_service: Source of the user's accounts.
        formatter: Used to render balances (default ``$``, ``,``, ``.``).
        greeting: Welcome text shown in the header.
        placeholder_rows: Skeleton rows exposed while loading.
        on_error: Called per failed branch with ``(error, title, message)``.
        on_complete: Called once per cycle with the terminal result.
        clock: Returns the header timestamp at join time.
    """

    def __init__(
        self,
        profile_service: ProfileService,
        account_service: AccountService,
        *,
        formatter: CurrencyFormatter | None = None,
        greeting: str = "Good morning",
        placeholder_rows: int = 10,
        on_error: ErrorHandler | None = None,
        on_complete: CompletionHandler | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.profile_service = profile_service
        self.account_service = account_service
        self.formatter = formatter or CurrencyFormatter()
        self.greeting = greeting
        self.placeholder_rows = placeholder_rows
        self.on_error = on_error
        self.on_complete = on_complete
        self.clock = clock

        self._state: LoadResult = Idle()
        self._generation = 0

    @property
    def state(self) -> LoadResult:
        """Current state; replaced wholesale on every transition."""
        return self._state

    @property
    def is_loaded(self) -> bool:
        return isinstance(self._state, Loaded)

    def reset(self) -> None:
        """Drop any previous result and show placeholder rows."""
        placeholders = build_account_view_models(
            [Account.make_placeholder()] * self.placeholder_rows,
            self.formatter,
        )
        self._state = Loading(placeholders=placeholders)

    async def load(self, user_id: str) -> LoadResult:
        """Run one load cycle for *user_id* and return its terminal state.

        Raises:
            ValueError: if *user_id* is empty.
        """
        if not user_id:
            raise ValueError("user_id cannot be empty")

        self._generation += 1
        cycle = _Cycle(generation=self._generation, user_id=user_id)
        self.reset()
        logger.debug(f"Load cycle {cycle.generation} started for user {user_id}")

        group = JoinGroup()
        tasks = [
            self._launch(group, cycle, "profile", self._fetch_profile(cycle)),
            self._launch(group, cycle, "accounts", self._fetch_accounts(cycle)),
        ]
        await group.wait()
        # Tasks have left the group; let them finish their final step.
        await asyncio.gather(*tasks)

        if cycle.unexpected:
            # Leave a terminal state behind before propagating the bug.
            self._publish(cycle, Failed(errors=cycle.ordered_errors()))
            raise cycle.unexpected[0]

        try:
            result = self._join(cycle)
        except Exception:
            self._publish(cycle, Failed(errors=cycle.ordered_errors()))
            raise
        self._publish(cycle, result)
        return result

    # ── Internal ───────────────────────────────────────────────────

    def _publish(self, cycle: _Cycle, result: LoadResult) -> None:
        if cycle.generation != self._generation:
            logger.debug(f"Load cycle {cycle.generation} superseded by {self._generation}; not publishing")
            return

        self._state = result
        if isinstance(result, Loaded):
            logger.info(f"Loaded summary for user {cycle.user_id}: {len(result.bundle.accounts)} accounts")
        else:
            logger.info(f"Summary load for user {cycle.user_id} failed: {[e.value for e in result.errors]}")
        if self.on_complete is not None:
            self.on_complete(result)

    def _launch(
        self, group: JoinGroup, cycle: _Cycle, branch: str, fetch: Coroutine[Any, Any, None]
    ) -> asyncio.Task:
        group.enter()

        async def run() -> None:
            try:
                await fetch
            except FetchError as exc:
                cycle.errors[branch] = exc.kind
                logger.warning(f"Fetching {branch} for user {cycle.user_id} failed: {exc}")
                self._display_error(cycle, exc.kind)
            except Exception as exc:
                cycle.unexpected.append(exc)
                logger.exception(f"Unexpected error fetching {branch} for user {cycle.user_id}")
            finally:
                group.leave()

        return asyncio.create_task(run(), name=f"summary-{branch}-{cycle.generation}")

    async def _fetch_profile(self, cycle: _Cycle) -> None:
        profile = await self.profile_service.fetch_profile(cycle.user_id)
        if profile is None:
            raise DecodingError("Profile service returned no profile")
        cycle.profile = profile

    async def _fetch_accounts(self, cycle: _Cycle) -> None:
        accounts = await self.account_service.fetch_accounts(cycle.user_id)
        if accounts is None:
            raise DecodingError("Account service returned no accounts")
        cycle.accounts = list(accounts)

    def _display_error(self, cycle: _Cycle, error: LoadError) -> None:
        if cycle.generation != self._generation or self.on_error is None:
            return
        title, message = title_and_message(error)
        self.on_error(error, title, message)

    def _join(self, cycle: _Cycle) -> LoadResult:
        if cycle.errors or cycle.profile is None or cycle.accounts is None:
            return Failed(errors=cycle.ordered_errors())

        header = HeaderViewModel(
            welcome_message=self.greeting,
            name=cycle.profile.first_name,
            date=self.clock(),
        )
        bundle = SummaryBundle(
            profile=cycle.profile,
            header=header,
            accounts=build_account_view_models(cycle.accounts, self.formatter),
        )
        return Loaded(bundle=bundle)
