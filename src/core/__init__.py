"""
Core digit systems, arithmetic primitives, contracts and error taxonomy.

This module contains the foundational building blocks the conversion
engine and its strategies are assembled from.
"""
