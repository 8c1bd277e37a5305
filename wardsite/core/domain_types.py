"""Domain Types — enums that replace bare strings across the codebase.

Invariants:
    - All valid colors encoded as an Enum — no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum


class AuxiliaryColor(str, Enum):
    """Accent color keys assigned to auxiliaries."""
    BLUE = "blue"
    PURPLE = "purple"
    GREEN = "green"
    AMBER = "amber"
    ORANGE = "orange"
