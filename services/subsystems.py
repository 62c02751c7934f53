"""
Subsystems

The lower-level collaborators wrapped by SubsystemFacade. Each one can be
used directly by client code or driven through the facade; to a subsystem
the facade is just another client.

Both subsystems are stateless apart from their lifecycle:
- owner: the facade that adopted the instance (None until adopted)
- released: set once, when the owning facade is closed

Ownership Model:
A subsystem handed to a facade is transferred to it. The facade becomes
the only party allowed to release it, and a subsystem can be adopted by
one facade at most.
"""

from typing import Optional

from logging_config import setup_logging

logger = setup_logging(__name__, log_file="subsystems.log")


# =============================================================================
# Lifecycle Base
# =============================================================================

class Subsystem:
    """Ownership and release tracking shared by every subsystem."""

    name = "Subsystem"

    def __init__(self):
        self._owner: Optional[object] = None
        self._released = False

    @property
    def owner(self) -> Optional[object]:
        return self._owner

    @property
    def released(self) -> bool:
        return self._released

    def adopt(self, owner: object) -> None:
        """
        Transfer ownership of this subsystem to ``owner``.

        Args:
            owner: The facade taking responsibility for releasing it

        Raises:
            ValueError: If the subsystem is already released or owned by
                another facade
        """
        if self._released:
            raise ValueError(f"{self.name} has already been released")
        if self._owner is not None and self._owner is not owner:
            raise ValueError(f"{self.name} is already owned by another facade")
        self._owner = owner

    def disown(self, owner: object) -> None:
        """Hand the subsystem back when ``owner`` fails to finish construction."""
        if self._owner is owner:
            self._owner = None

    def release(self, owner: Optional[object] = None) -> None:
        """
        Release the subsystem. Must happen exactly once.

        Only the owning facade may release an adopted subsystem. An
        unowned subsystem is released by its creator with no owner.

        Args:
            owner: The party releasing the subsystem

        Raises:
            RuntimeError: If ``owner`` does not own the subsystem, or the
                subsystem was already released
        """
        if owner is not self._owner:
            raise RuntimeError(f"{self.name} can only be released by its owner")
        if self._released:
            raise RuntimeError(f"{self.name} released twice")
        self._released = True
        logger.debug(f"{self.name} released")

    def __repr__(self) -> str:
        state = "released" if self._released else "active"
        return f"{type(self).__name__}({state})"


# =============================================================================
# Subsystems
# =============================================================================

class SubsystemA(Subsystem):
    """First subsystem: gets ready, then goes."""

    name = "Subsystem1"

    def ready(self) -> str:
        return "Subsystem1: Ready!\n"

    def go(self) -> str:
        return "Subsystem1: Go!\n"


class SubsystemB(Subsystem):
    """Second subsystem: gets ready, then fires."""

    name = "Subsystem2"

    def get_ready(self) -> str:
        return "Subsystem2: Get ready!\n"

    def fire(self) -> str:
        return "Subsystem2: Fire!\n"
