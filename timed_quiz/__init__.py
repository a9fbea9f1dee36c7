"""Timed console quiz driven by a CSV question file."""
