"""
Core arbitrary-precision integer primitives and value models.

This module contains stateless building blocks over Python's int that are
independent of any I/O or external system.
"""
