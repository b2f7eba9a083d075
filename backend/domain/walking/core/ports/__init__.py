"""Walking domain ports."""

from .repository import IWalkingRepository

__all__ = ["IWalkingRepository"]
