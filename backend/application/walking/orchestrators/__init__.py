"""Orchestrators for walking workflows."""

from .recalculation_cascade import CascadeResult, RecalculationCascade

__all__ = [
    "CascadeResult",
    "RecalculationCascade",
]
