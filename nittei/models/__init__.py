"""Shared typed data models for Nittei.

This package contains dataclasses used across formatter modules to avoid
cross-module coupling and circular imports.
"""

from .datatypes import (
    DateComponents,
    Formatted,
    LineReport,
    PatternDefinition,
    SubstitutionOutcome,
    TextReport,
    TimeComponents,
    TodayInfo,
    Unchanged,
)

__all__ = [
    "DateComponents",
    "Formatted",
    "LineReport",
    "PatternDefinition",
    "SubstitutionOutcome",
    "TextReport",
    "TimeComponents",
    "TodayInfo",
    "Unchanged",
]
