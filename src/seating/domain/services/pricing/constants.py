"""Dimensional constants for pricing and fabric estimation.

Monetary rates live in the PriceTable; these are physical constants of
the product range.
"""

from __future__ import annotations


# Corner module width in inches, keyed by seat width in inches
CORNER_WIDTHS: dict[int, int] = {
    20: 28,
    22: 30,
    24: 32,
    26: 34,
    28: 36,
}
DEFAULT_CORNER_WIDTH = 30

BACKREST_WIDTH = 14

# Plain seater fabric is tabulated per 120 inches of seating width
SEATER_FABRIC_REFERENCE_IN = 120.0

# Lounger reference size is 5 ft 6 in; price and fabric grow per 6 in above it
LOUNGER_REFERENCE_IN = 66
LOUNGER_INCREMENT_IN = 6

# Seat count the base price refers to
BASE_SEATS = 2


def corner_width(seat_width: int) -> int:
    """Corner width for a seat width, falling back to the 30 in bucket."""
    return CORNER_WIDTHS.get(seat_width, DEFAULT_CORNER_WIDTH)


def lounger_increments(size_inches: int) -> int:
    """Full 6-inch increments above the lounger reference size."""
    return max(0, (size_inches - LOUNGER_REFERENCE_IN) // LOUNGER_INCREMENT_IN)
