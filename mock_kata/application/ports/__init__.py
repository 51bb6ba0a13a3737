"""Port interfaces for external dependencies.

This module defines abstract interfaces (protocols) that external
adapters must implement. This enables dependency injection and testing.
"""

from .services import (
    CryptographerPort,
    LoggerPort,
    RecognizerPort,
    SenderPort,
    ThingServicePort,
)

__all__ = [
    "CryptographerPort",
    "LoggerPort",
    "RecognizerPort",
    "SenderPort",
    "ThingServicePort",
]
