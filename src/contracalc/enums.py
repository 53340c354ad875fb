"""Type-safe enums for the belt calculator."""

from enum import Enum


class BeltRouting(Enum):
    """How the belt is wrapped around the two pulleys"""
    NORMAL = "normal"  # Untwisted - both pulleys turn the same way
    CONTRA = "contra"  # Twisted/crossed - pulleys turn in opposite senses


class RoundingPolicy(Enum):
    """How a continuous belt length is mapped to a tooth count"""
    ROUNDED = "rounded"  # Nearest multiple of 5 (stock belts)
    FLOOR = "floor"      # Largest whole count not longer than desired
    CEILING = "ceiling"  # Smallest whole count not shorter than desired
