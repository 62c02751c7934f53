"""
Pytest configuration file for the facade demo project.
This file sets up the Python path so tests can import modules from the project root.
"""
import sys
from pathlib import Path

import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


EXPECTED_OPERATION = (
    "Facade initializes subsystems:\n"
    "Subsystem1: Ready!\n"
    "Subsystem2: Get ready!\n"
    "Facade orders subsystems to perform the action:\n"
    "Subsystem1: Go!\n"
    "Subsystem2: Fire!\n"
)


@pytest.fixture
def expected_operation():
    """The six-line block every facade operation() produces."""
    return EXPECTED_OPERATION


@pytest.fixture
def counting_subsystems(monkeypatch):
    """
    Instrumented SubsystemA/SubsystemB subclasses that count constructions
    and releases per type. The facade module and the services package are
    patched so default-created and demo-created subsystems are counted too.
    """
    from services.subsystems import SubsystemA, SubsystemB

    counts = {"a_created": 0, "a_released": 0, "b_created": 0, "b_released": 0}

    class CountingA(SubsystemA):
        def __init__(self):
            super().__init__()
            counts["a_created"] += 1

        def release(self, owner=None):
            super().release(owner)
            counts["a_released"] += 1

    class CountingB(SubsystemB):
        def __init__(self):
            super().__init__()
            counts["b_created"] += 1

        def release(self, owner=None):
            super().release(owner)
            counts["b_released"] += 1

    monkeypatch.setattr("facades.subsystem_facade.SubsystemA", CountingA)
    monkeypatch.setattr("facades.subsystem_facade.SubsystemB", CountingB)
    monkeypatch.setattr("services.SubsystemA", CountingA)
    monkeypatch.setattr("services.SubsystemB", CountingB)
    return CountingA, CountingB, counts
