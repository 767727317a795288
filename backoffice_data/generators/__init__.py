"""Deterministic generators, field synthesizers and literal pools."""
