"""Aggregated search and detail lookups across MacCMS-style video APIs."""

__version__ = "0.1.0"
