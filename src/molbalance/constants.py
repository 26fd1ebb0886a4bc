"""Shared numeric constants."""

ARROW = "->"
PLUS = "+"

# Pivots and residuals below this magnitude are treated as zero.
PIVOT_TOLERANCE = 1e-10

# Largest denominator accepted when rationalizing solver output.
MAX_DENOMINATOR = 1_000_000

FALLBACK_COLOR = "#909090"
FALLBACK_RADIUS = 0.8  # Å, display radius for unknown elements
FALLBACK_COVALENT_RADIUS = 1.0  # Å, per element when estimating bond lengths

DUMMY_ELEMENT = "X"
