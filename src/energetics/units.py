"""Unit conversion factors for energy measurements.

All conversions route through joules as the canonical unit."""

JOULES_PER_JOULE = 1.0
"""Identity factor for the canonical unit."""

JOULES_PER_CALORIE = 4.184
"""Unit conversion factor for (thermochemical) calories to joules."""

JOULES_PER_BTU = 1055.06
"""Unit conversion factor for British thermal units to joules."""

CALORIES_PER_BTU = JOULES_PER_BTU / JOULES_PER_CALORIE
"""Unit conversion factor for British thermal units to calories."""
