"""
Test suite for the number conversion engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
