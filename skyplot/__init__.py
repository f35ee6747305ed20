"""SKYPLOT: drone survey polygon estimation with no-fly zone checks."""

__version__ = "1.0.0"
