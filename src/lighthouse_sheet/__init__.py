"""Append Lighthouse performance results to a Google Sheet."""

__version__ = "0.1.0"
