"""
Core math modules

Примитивы длинной целочисленной арифметики поверх int: GCD/LCM,
целые корни, быстрый факториал, подсчёт цифр, разбор дробей в Decimal.
"""

# Integer Guards
from src.core.math.integer_guards import (
    EmptySequenceError,
    InvalidArgumentError,
    validate_integer,
    validate_min_int,
    validate_non_negative_int,
)

# GCD / LCM
from src.core.math.gcd_lcm import (
    gcd,
    gcd_of,
    is_coprime,
    lcm,
    lcm_of,
)

# Integer Roots
from src.core.math.roots import (
    nth_root,
    square,
    square_root,
)

# Fast Factorial
from src.core.math.factorial import (
    factorial,
    multiply_range,
)

# Digits
from src.core.math.digits import (
    get_length,
    get_range,
    get_significant_digits,
)

# Fraction Parser
from src.core.math.fraction_parser import (
    DEFAULT_FRACTION_PRECISION,
    DEFAULT_FRACTION_SEPARATOR,
    FractionParseError,
    FractionParser,
    FractionParserConfig,
    parse_fraction,
    try_parse_fraction,
)

__all__ = [
    # Integer Guards — Exceptions
    "EmptySequenceError",
    "InvalidArgumentError",
    # Integer Guards — Validation
    "validate_integer",
    "validate_min_int",
    "validate_non_negative_int",
    # GCD / LCM
    "gcd",
    "gcd_of",
    "is_coprime",
    "lcm",
    "lcm_of",
    # Integer Roots
    "nth_root",
    "square",
    "square_root",
    # Fast Factorial
    "factorial",
    "multiply_range",
    # Digits
    "get_length",
    "get_range",
    "get_significant_digits",
    # Fraction Parser — Constants
    "DEFAULT_FRACTION_PRECISION",
    "DEFAULT_FRACTION_SEPARATOR",
    # Fraction Parser — Exceptions
    "FractionParseError",
    # Fraction Parser — Types
    "FractionParser",
    "FractionParserConfig",
    # Fraction Parser — Functions
    "parse_fraction",
    "try_parse_fraction",
]
