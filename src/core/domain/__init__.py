"""
Domain models and value objects.

Contains value objects returned by the math primitives.
"""

from src.core.domain.root_result import RootResult

__all__ = [
    "RootResult",
]
