"""
Engineering constants for RC beam design.
"""

import math

# Standard bar sizes in mm
STANDARD_BAR_SIZES = [8, 10, 12, 16, 20, 25, 32]

# Stirrup bar sizes in mm
STIRRUP_BAR_SIZES = [6, 8, 10, 12]

# Unit weight of reinforced concrete (kN/m³)
CONCRETE_UNIT_WEIGHT = 25.0

# Default unit weight of brick masonry (kN/m³); lightweight blocks are lower
MASONRY_UNIT_WEIGHT = 20.0

# Partial safety factor for loads, IS 456 Table 18 (DL + LL)
LOAD_FACTOR = 1.5

# Two-legged vertical stirrups
STIRRUP_LEGS = 2


def bar_area(diameter: float) -> float:
    """Cross-sectional area of one bar (mm²)."""
    return math.pi / 4 * diameter ** 2
