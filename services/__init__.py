"""
Services Package

Contains the subsystems driven by the facade layer. Each subsystem can
also be used directly by client code.

Available Services:
- SubsystemA: ready() / go()
- SubsystemB: get_ready() / fire()
- Subsystem: shared ownership and release tracking
"""

from services.subsystems import Subsystem, SubsystemA, SubsystemB

__all__ = [
    'Subsystem',
    'SubsystemA',
    'SubsystemB',
]
