"""Parties that are told about changes in a parking lot's occupancy."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Owner(ABC):
    """The lot owner, told when the lot fills up and when space frees up."""

    @abstractmethod
    def on_lot_full(self, message: str) -> None:
        """Called when the lot reaches its capacity."""

    @abstractmethod
    def on_space_available(self, message: str) -> None:
        """Called when a full lot has room again."""


class Security(ABC):
    """Airport security staff, told when the lot fills up."""

    @abstractmethod
    def on_lot_full(self, message: str) -> None:
        """Called when the lot reaches its capacity."""