"""
Utilities for working with H3 cell indexes.
"""
