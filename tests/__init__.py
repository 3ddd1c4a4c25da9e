"""
Test suite for the integer primitives

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
