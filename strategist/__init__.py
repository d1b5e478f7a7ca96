"""Strategist: a utility-based tactical decision engine for game agents."""

__version__ = "0.1.0"
