"""Parametric kitchen cabinet generation: cabinets, cut lists and drill patterns."""

__version__ = "0.1.0"
