"""Deterministic query-construction engine."""
