"""Blessed terminal UI."""
