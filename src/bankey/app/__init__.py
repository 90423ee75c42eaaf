"""Screen flow between login, onboarding and the account summary."""

from .coordinator import AppCoordinator, LocalState, Screen

__all__ = ["AppCoordinator", "LocalState", "Screen"]
