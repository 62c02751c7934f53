"""
Subsystem Facade

Provides one simplified operation over SubsystemA and SubsystemB so client
code never has to know the order in which the subsystems must be driven.

This facade orchestrates:
- SubsystemA (ready, go)
- SubsystemB (get_ready, fire)

Design Goals:
1. Hide complexity - clients call operation() instead of four subsystem calls
2. Own the subsystems - the facade releases them when it is closed
3. Dependency injection - subsystems can be supplied or created on demand

Example Usage:
```python
from facades import get_subsystem_facade

with get_subsystem_facade() as facade:
    print(facade.operation(), end="")
```
"""

from typing import Optional
import logging

from services.subsystems import SubsystemA, SubsystemB


class SubsystemFacade:
    """
    Facade delegating to one SubsystemA and one SubsystemB.

    ## Ownership:
    Whichever subsystems end up in the facade's two slots are adopted by it,
    whether the caller supplied them or the facade created them. Closing the
    facade releases both exactly once. A supplied subsystem must not be
    handed to another facade afterwards.

    ## Lifecycle:
    open (two valid subsystem references) -> closed. Use the facade as a
    context manager, or call close() explicitly.

    ## Example Usage:
    ```python
    a, b = SubsystemA(), SubsystemB()
    with SubsystemFacade(a, b) as facade:
        result = facade.operation()
    assert a.released and b.released
    ```
    """

    def __init__(
        self,
        subsystem_a: Optional[SubsystemA] = None,
        subsystem_b: Optional[SubsystemB] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the facade with optional subsystem dependencies.

        Args:
            subsystem_a: Optional SubsystemA (created if None)
            subsystem_b: Optional SubsystemB (created if None)
            logger: Optional logger instance

        Raises:
            ValueError: If a supplied subsystem is owned by another facade
                or has already been released
        """
        self._logger = logger or logging.getLogger(__name__)
        self._subsystem_a = subsystem_a if subsystem_a is not None else SubsystemA()
        self._subsystem_b = subsystem_b if subsystem_b is not None else SubsystemB()
        self._subsystem_a.adopt(self)
        try:
            self._subsystem_b.adopt(self)
        except ValueError:
            self._subsystem_a.disown(self)
            raise
        self._closed = False
        self._logger.debug(
            f"Facade created (supplied: a={subsystem_a is not None}, b={subsystem_b is not None})"
        )

    # =========================================================================
    # Property Accessors
    # =========================================================================

    @property
    def subsystem_a(self) -> SubsystemA:
        return self._subsystem_a

    @property
    def subsystem_b(self) -> SubsystemB:
        return self._subsystem_b

    @property
    def closed(self) -> bool:
        return self._closed

    # =========================================================================
    # Operations
    # =========================================================================

    def operation(self) -> str:
        """
        Drive both subsystems through their full sequence.

        Calls, in order: A.ready, B.get_ready, A.go, B.fire, with a header
        line before each pair.

        Returns:
            The concatenated output of every step

        Raises:
            RuntimeError: If the facade has been closed
        """
        if self._closed:
            raise RuntimeError("operation() called on a closed facade")

        result = "Facade initializes subsystems:\n"
        result += self._subsystem_a.ready()
        result += self._subsystem_b.get_ready()
        result += "Facade orders subsystems to perform the action:\n"
        result += self._subsystem_a.go()
        result += self._subsystem_b.fire()
        return result

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Release both owned subsystems. Calling close() again does nothing."""
        if self._closed:
            return
        self._closed = True
        try:
            self._subsystem_a.release(self)
        finally:
            self._subsystem_b.release(self)
        self._logger.debug("Facade closed, subsystems released")

    def __enter__(self) -> "SubsystemFacade":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"SubsystemFacade({self._subsystem_a!r}, {self._subsystem_b!r}, {state})"


# =============================================================================
# Factory Function
# =============================================================================


def get_subsystem_facade(
    subsystem_a: Optional[SubsystemA] = None,
    subsystem_b: Optional[SubsystemB] = None,
    logger: Optional[logging.Logger] = None,
) -> SubsystemFacade:
    """
    Create a SubsystemFacade.

    This is the recommended way for client code to obtain a facade. Any
    subsystem passed in is transferred to the returned facade.

    Args:
        subsystem_a: Optional existing SubsystemA
        subsystem_b: Optional existing SubsystemB
        logger: Optional logger instance

    Returns:
        A new, open SubsystemFacade
    """
    return SubsystemFacade(
        subsystem_a=subsystem_a,
        subsystem_b=subsystem_b,
        logger=logger,
    )
