"""Platewise - restaurant review landing page."""

__version__ = "0.1.0"
