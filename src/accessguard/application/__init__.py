"""
Application layer for request admission.

Contains the entry point that coordinates validation runs.
"""

from accessguard.application.coordinator import AccessCoordinator

__all__ = [
    "AccessCoordinator",
]
