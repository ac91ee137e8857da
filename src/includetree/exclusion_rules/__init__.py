"""Exclusion rules for rejecting resource paths from an include parameter."""

from .base_rules import BaseExclusionRules
from .pattern_rules import PatternExclusionRules

__all__ = [
    "BaseExclusionRules",
    "PatternExclusionRules",
]
