"""
RootResult — Результат извлечения целого корня

Immutable Pydantic модель пары (root, remainder), возвращаемой nth_root:
    value = root ** power + remainder
где root — наибольшее целое, для которого root ** power <= value.
"""

from pydantic import BaseModel, Field, field_validator


class RootResult(BaseModel):
    """
    Целый корень степени power с точным остатком.

    Immutable модель (frozen=True). strict=True: значения не приводятся
    из строк/float, bool отклоняется.
    """

    root: int = Field(..., description="Floor-корень: наибольшее r, где r ** power <= value")
    remainder: int = Field(..., description="Остаток value - root ** power")
    power: int = Field(..., description="Степень корня (>= 1)")

    model_config = {"frozen": True, "strict": True}

    @field_validator("root", "remainder")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """root и remainder неотрицательны для любого value >= 0."""
        if v < 0:
            raise ValueError(f"must be non-negative, got {v}")
        return v

    @field_validator("power")
    @classmethod
    def validate_power(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"power must be >= 1, got {v}")
        return v

    @property
    def value(self) -> int:
        """Исходное значение: root ** power + remainder."""
        return self.root**self.power + self.remainder

    @property
    def is_exact(self) -> bool:
        """True если value является точной степенью (remainder == 0)."""
        return self.remainder == 0

    def as_tuple(self) -> tuple[int, int]:
        """Пара (root, remainder)."""
        return (self.root, self.remainder)
