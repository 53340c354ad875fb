"""
Schema version for belt drive design JSON.

This defines the contract between the calculator output and anything
that loads a saved design back.
"""

SCHEMA_VERSION = "1.0"
