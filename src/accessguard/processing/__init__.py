"""
Request processing with stackable decorators.

A BasicOperation processes the request; decorators add surrounding
behaviour (timestamps, address logging) and delegate inward.
"""

from accessguard.processing.base import BasicOperation
from accessguard.processing.decorators import (
    DecoratorFactory,
    IPLoggingDecorator,
    RequestDecorator,
    TimeLoggingDecorator,
    depth,
    wrap,
)

__all__ = [
    "BasicOperation",
    "RequestDecorator",
    "TimeLoggingDecorator",
    "IPLoggingDecorator",
    "DecoratorFactory",
    "wrap",
    "depth",
]
