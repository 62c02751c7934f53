"""
Facade Layer

Provides a simplified, high-level interface over the subsystems in
services/, hiding the order in which they have to be driven.

Patterns Applied:
1. Facade Pattern - Single entry point to several subsystems
2. Dependency Injection - Subsystems injected or created by the facade
3. Factory Functions - Simplified instantiation

Main Components:
- SubsystemFacade: Unified interface for SubsystemA and SubsystemB
- get_subsystem_facade(): Factory function
"""

from facades.subsystem_facade import SubsystemFacade, get_subsystem_facade

__all__ = [
    'SubsystemFacade',
    'get_subsystem_facade',
]
