"""
Type definitions used across layers
"""

from enum import StrEnum

# --- NOTE: same names as the enums in src/chess/pieces.py. These are the string versions sent across the boundary,
# --- let the imports show which versions are used in what part of the code


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"
