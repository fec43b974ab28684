"""Base class shared by the resource managers."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .management import Management


class Manager:
    """Binds one resource family to the shared dispatcher.

    Managers never validate, retry or cache: each method shapes exactly one
    call to ``Management.request``.
    """

    def __init__(self, management: "Management"):
        """Initialize the manager.

        Args:
            management: Dispatcher owning the HTTP session
        """
        self.management = management

    def _uri(self, *path: str) -> str:
        return self.management.uri(*path)
