"""Keyboard mapping and command dispatch for the blessed UI."""
