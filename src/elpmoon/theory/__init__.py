"""Argument generation, series evaluation, position composition and frame rotations."""
