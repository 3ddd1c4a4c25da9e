"""
Тесты для Fraction Parser

Проверяет:
1. Корректный разбор "<numerator> / <denominator>"
2. None для некорректного входа без исключений (try_parse_fraction)
3. FractionParseError со ссылкой на причину (parse_fraction)
4. Нулевой знаменатель, NaN/Infinity
5. Конфигурацию точности и разделителя
6. Тотальность на произвольном тексте (property-based)
"""

import decimal
import logging
from decimal import Decimal
from fractions import Fraction

import pytest
from hypothesis import given
from hypothesis import strategies as st

from src.core.math.fraction_parser import (
    DEFAULT_FRACTION_PRECISION,
    FractionParseError,
    FractionParser,
    FractionParserConfig,
    parse_fraction,
    try_parse_fraction,
)


# =============================================================================
# ТЕСТЫ: успешный разбор
# =============================================================================


class TestTryParseFractionSuccess:
    """Корректные дроби."""

    def test_simple_integer_fraction(self) -> None:
        """"10/2" → 5."""
        result = try_parse_fraction("10/2")
        assert result == Decimal(5)

    def test_decimal_parts_with_spaces(self) -> None:
        """" 1234.45 / 346.456 " → частное высокой точности."""
        result = try_parse_fraction(" 1234.45 / 346.456 ")
        assert result is not None

        with decimal.localcontext() as ctx:
            ctx.prec = 50
            assert +result == Decimal("1234.45") / Decimal("346.456")

    def test_non_terminating_quotient_uses_precision(self) -> None:
        """1/3 рассчитывается с точностью DEFAULT_FRACTION_PRECISION."""
        result = try_parse_fraction("1/3")
        assert result is not None
        assert len(result.as_tuple().digits) == DEFAULT_FRACTION_PRECISION

    def test_negative_parts(self) -> None:
        assert try_parse_fraction("-3/4") == Decimal("-0.75")
        assert try_parse_fraction("3 / -4") == Decimal("-0.75")

    def test_exponent_notation(self) -> None:
        assert try_parse_fraction("1e3/4") == Decimal(250)

    def test_zero_numerator(self) -> None:
        assert try_parse_fraction("0/7") == 0

    def test_empty_segments_are_dropped(self) -> None:
        """Пустые сегменты отбрасываются: "1//2" → 0.5."""
        assert try_parse_fraction("1//2") == Decimal("0.5")
        assert try_parse_fraction("/1/2/") == Decimal("0.5")

    def test_huge_integers(self) -> None:
        numerator = 10**100
        assert try_parse_fraction(f"{numerator}/{10**98}") == Decimal(100)

    def test_exponent_beyond_default_context_range(self) -> None:
        """Экспонента больше 999999 не вызывает Overflow."""
        assert try_parse_fraction("1e999999 / 1e-10") == Decimal("1e1000009")

    def test_very_long_operand_is_not_rounded(self) -> None:
        """Операнд длиннее 5000 цифр разбирается точно."""
        operand = "1" + "0" * 5999 + "1"
        assert try_parse_fraction(f"{operand}/{operand}") == 1


# =============================================================================
# ТЕСТЫ: отказ без исключений
# =============================================================================


class TestTryParseFractionFailure:
    """Некорректный вход → None, без исключений."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "\t\n",
            "abc",
            "1/2/3",
            "1/",
            "/2",
            "/",
            "1/ /2",
            "1/ ",
            "a/2",
            "1/b",
            "1.2.3/4",
            "12",
        ],
    )
    def test_malformed_text(self, text: str) -> None:
        assert try_parse_fraction(text) is None

    def test_none_input(self) -> None:
        assert try_parse_fraction(None) is None

    def test_non_string_input(self) -> None:
        assert try_parse_fraction(10) is None

    def test_zero_denominator(self) -> None:
        """Деление на ноль → None."""
        assert try_parse_fraction("1/0") is None
        assert try_parse_fraction("0/0") is None
        assert try_parse_fraction("1/0.000") is None

    def test_unrepresentable_exponent_is_not_zero(self) -> None:
        """Экспонента за пределами decimal → None, а не 0."""
        assert try_parse_fraction("1e-99999999999999999999999/1") is None

    def test_quotient_underflow_is_rejected(self) -> None:
        """Частное, округлённое до нуля при underflow, не выдаётся за успех."""
        assert try_parse_fraction("1e-999999999999999990 / 1e10000") is None

    @pytest.mark.parametrize("text", ["NaN/2", "1/NaN", "Infinity/2", "1/-Infinity", "sNaN/1"])
    def test_non_finite_parts(self, text: str) -> None:
        assert try_parse_fraction(text) is None

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Причина отказа пишется в DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="src.core.math.fraction_parser"):
            assert try_parse_fraction("1/2/3") is None

        assert "Fraction rejected" in caplog.text

    def test_global_context_untouched(self) -> None:
        """Разбор не меняет контекст decimal текущего потока."""
        before = decimal.getcontext().prec
        try_parse_fraction("1/3")
        try_parse_fraction("1/0")
        assert decimal.getcontext().prec == before


# =============================================================================
# ТЕСТЫ: строгий разбор
# =============================================================================


class TestParseFraction:
    """parse_fraction: те же правила, но FractionParseError."""

    def test_success(self) -> None:
        assert parse_fraction("10/2") == Decimal(5)

    def test_wrong_part_count(self) -> None:
        with pytest.raises(FractionParseError, match="got 3 part"):
            parse_fraction("1/2/3")

    def test_empty(self) -> None:
        with pytest.raises(FractionParseError, match="empty"):
            parse_fraction("  ")

    def test_bad_numerator_is_chained(self) -> None:
        """Исходная ошибка decimal доступна через __cause__."""
        with pytest.raises(FractionParseError, match="Couldn't parse numerator") as exc_info:
            parse_fraction("abc/2")

        assert isinstance(exc_info.value.__cause__, decimal.InvalidOperation)

    def test_bad_denominator(self) -> None:
        with pytest.raises(FractionParseError, match="Couldn't parse denominator"):
            parse_fraction("1/x")

    def test_zero_denominator(self) -> None:
        with pytest.raises(FractionParseError, match="Couldn't divide") as exc_info:
            parse_fraction("5/0")

        assert isinstance(exc_info.value.__cause__, decimal.DivisionByZero)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_fraction("nope")


# =============================================================================
# ТЕСТЫ: конфигурация
# =============================================================================


class TestFractionParserConfig:
    """Точность и разделитель."""

    def test_defaults(self) -> None:
        config = FractionParserConfig()
        assert config.precision == DEFAULT_FRACTION_PRECISION
        assert config.separator == "/"

    def test_custom_precision(self) -> None:
        parser = FractionParser(FractionParserConfig(precision=10))
        assert parser.try_parse("1/3") == Decimal("0.3333333333")

    def test_custom_separator(self) -> None:
        config = FractionParserConfig(separator=":")
        assert try_parse_fraction("3 : 4", config=config) == Decimal("0.75")
        assert try_parse_fraction("3/4", config=config) is None

    def test_invalid_precision(self) -> None:
        with pytest.raises(ValueError, match="precision must be >= 1"):
            FractionParserConfig(precision=0)

        with pytest.raises(TypeError):
            FractionParserConfig(precision=2.5)

    def test_empty_separator(self) -> None:
        with pytest.raises(ValueError, match="separator"):
            FractionParserConfig(separator="")

    def test_config_is_frozen(self) -> None:
        config = FractionParserConfig()
        with pytest.raises(AttributeError):
            config.precision = 3

    def test_low_precision_rounds_quotient_once(self) -> None:
        """Операнды не округляются до деления: 1234/1235 при prec=3 → 0.999."""
        parser = FractionParser(FractionParserConfig(precision=3))
        assert parser.try_parse("1234/1235") == Decimal("0.999")

    def test_operands_longer_than_precision(self) -> None:
        """Числитель длиннее precision участвует в делении целиком."""
        parser = FractionParser(FractionParserConfig(precision=5))
        assert parser.try_parse("123456789/3") == Decimal("4.1152E+7")

    @given(
        st.integers(min_value=1, max_value=10**30),
        st.integers(min_value=1, max_value=10**30),
        st.integers(min_value=1, max_value=12),
    )
    def test_matches_correctly_rounded_quotient(self, numerator: int, denominator: int, precision: int) -> None:
        """Результат совпадает с однократно округлённым точным частным."""
        parser = FractionParser(FractionParserConfig(precision=precision))

        with decimal.localcontext() as ctx:
            ctx.prec = precision
            expected = Decimal(numerator) / Decimal(denominator)

        assert parser.try_parse(f"{numerator}/{denominator}") == expected


# =============================================================================
# PROPERTY-BASED ТЕСТЫ
# =============================================================================


class TestFractionParserProperties:
    """Свойства на произвольных входах."""

    @given(st.text(max_size=40))
    def test_never_raises_on_arbitrary_text(self, text: str) -> None:
        result = try_parse_fraction(text)
        assert result is None or isinstance(result, Decimal)

    @given(
        st.text(alphabet="0123456789./ -eE+", max_size=20),
    )
    def test_never_raises_on_numeric_like_text(self, text: str) -> None:
        result = try_parse_fraction(text)
        assert result is None or result.is_finite()

    @given(
        st.integers(min_value=-(10**30), max_value=10**30),
        st.integers(min_value=-(10**30), max_value=10**30).filter(lambda x: x != 0),
    )
    def test_quotient_within_precision(self, numerator: int, denominator: int) -> None:
        """|result - n/d| <= |n/d| * 10 ** -(precision - 1)."""
        precision = 40
        parser = FractionParser(FractionParserConfig(precision=precision))

        result = parser.try_parse(f" {numerator} / {denominator} ")
        assert result is not None

        exact = Fraction(numerator, denominator)
        assert abs(Fraction(result) - exact) <= abs(exact) * Fraction(1, 10 ** (precision - 1))

    @given(
        st.integers(min_value=-(10**20), max_value=10**20),
        st.integers(min_value=0, max_value=20),
        st.integers(min_value=0, max_value=20),
    )
    def test_terminating_quotient_is_exact(self, numerator: int, twos: int, fives: int) -> None:
        """Знаменатель 2 ** a * 5 ** b даёт точное частное."""
        denominator = 2**twos * 5**fives
        result = try_parse_fraction(f"{numerator}/{denominator}")
        assert result is not None
        assert Fraction(result) == Fraction(numerator, denominator)

    @given(st.integers(min_value=-(10**30), max_value=10**30))
    def test_zero_denominator_always_none(self, numerator: int) -> None:
        assert try_parse_fraction(f"{numerator}/0") is None
