"""Pib Journal backend.

A single-admin journal API that keeps entries in a remote blob store,
enumerated by one JSON index document.
"""

__version__ = "1.0.0"
