"""Packaged defaults and lookup tables."""
