"""App coordinator — decides which top-level screen is visible.

Flow::

    LOGIN --did_login--> ONBOARDING (first time) --did_finish_onboarding--> MAIN
    LOGIN --did_login--> MAIN (already onboarded)
    MAIN  --did_logout--> LOGIN

The main screen gets ``coordinator.did_logout`` handed to it as a plain
callback; there is no global notification channel.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger


class Screen(enum.Enum):
    LOGIN = "login"
    ONBOARDING = "onboarding"
    MAIN = "main"


@dataclass
class LocalState:
    """Per-device flags (in-memory)."""

    has_onboarded: bool = False


ScreenChangeHandler = Callable[[Screen], None]


class AppCoordinator:
    """Owns the current :class:`Screen` and the transitions between them."""

    def __init__(
        self,
        *,
        local_state: LocalState | None = None,
        on_screen_change: ScreenChangeHandler | None = None,
    ):
        self.local_state = local_state or LocalState()
        self.on_screen_change = on_screen_change
        self.screen = Screen.LOGIN

    def did_login(self) -> Screen:
        if self.local_state.has_onboarded:
            return self._show(Screen.MAIN)
        return self._show(Screen.ONBOARDING)

    def did_finish_onboarding(self) -> Screen:
        if self.screen is not Screen.ONBOARDING:
            raise RuntimeError(f"Cannot finish onboarding from {self.screen.value} screen")
        self.local_state.has_onboarded = True
        return self._show(Screen.MAIN)

    def did_logout(self) -> Screen:
        return self._show(Screen.LOGIN)

    def _show(self, screen: Screen) -> Screen:
        logger.info(f"Screen {self.screen.value} -> {screen.value}")
        self.screen = screen
        if self.on_screen_change is not None:
            self.on_screen_change(screen)
        return screen
