"""
Fraction Parser — разбор текстовой дроби в Decimal высокой точности

Формат: "<numerator> / <denominator>", произвольные пробелы вокруг частей,
например " 1234.45 / 346.456 ".

Два контракта:
- try_parse_fraction: тотальная операция, при любой ошибке возвращает None
- parse_fraction: строгая операция, при ошибке FractionParseError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. try_parse_fraction никогда не пробрасывает исключение из-за входа
2. Ровно две непустые части после разбиения (пустые сегменты отбрасываются)
3. NaN/Infinity в числителе или знаменателе не принимаются
4. Деление выполняется в собственном decimal.Context, глобальный контекст
   потока не изменяется
5. Операнды разбираются точно, округляется только частное (один раз)
6. Экспонента ограничена только пределами decimal (MAX_EMAX / MIN_EMIN),
   потеря значения при underflow не выдаётся за успех
"""

import decimal
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Final, Optional

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Точность деления по умолчанию (значащих цифр)
DEFAULT_FRACTION_PRECISION: Final[int] = 5000

# Разделитель числителя и знаменателя
DEFAULT_FRACTION_SEPARATOR: Final[str] = "/"

# Сигналы decimal, которые должны прерывать вычисление
_TRAPPED_SIGNALS: Final[tuple] = (
    decimal.InvalidOperation,
    decimal.DivisionByZero,
    decimal.Overflow,
    decimal.Underflow,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FractionParseError(ValueError):
    """Не удалось разобрать числитель, знаменатель или выполнить деление."""

    pass


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FractionParserConfig:
    """Конфигурация разбора дробей.

    Параметры точности и формата.
    """

    # Количество значащих цифр результата деления
    precision: int = DEFAULT_FRACTION_PRECISION

    # Разделитель частей дроби
    separator: str = DEFAULT_FRACTION_SEPARATOR

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise TypeError(f"precision must be an integer, got {type(self.precision).__name__}")
        if self.precision < 1:
            raise ValueError(f"precision must be >= 1, got {self.precision}")
        if not self.separator:
            raise ValueError("separator must be a non-empty string")


# =============================================================================
# PARSER
# =============================================================================


class FractionParser:
    """Разбор текстовой дроби в Decimal.

    Порядок проверок:
    1. Пустой / пробельный вход
    2. Разбиение по разделителю, отбрасывание пустых сегментов, trim
    3. Ровно две части
    4. Разбор каждой части как конечного Decimal
    5. Деление в контексте заданной точности
    """

    def __init__(self, config: FractionParserConfig | None = None):
        """Инициализация парсера.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or FractionParserConfig()

    def _new_context(self) -> decimal.Context:
        # Диапазон экспоненты не ограничен сверх возможностей decimal
        return decimal.Context(
            prec=self.config.precision,
            Emax=decimal.MAX_EMAX,
            Emin=decimal.MIN_EMIN,
            traps=list(_TRAPPED_SIGNALS),
        )

    def _split(self, text: object) -> tuple[str, str]:
        if not isinstance(text, str) or not text.strip():
            raise FractionParseError("Fraction text is empty")

        # Пустые сегменты отбрасываются до trim: "1//2" -> ["1", "2"],
        # а "1/ /2" даёт три сегмента
        parts = [part.strip() for part in text.split(self.config.separator) if part]

        if len(parts) != 2:
            raise FractionParseError(
                f"Expected exactly one '{self.config.separator}' separator "
                f"between two parts, got {len(parts)} part(s): {text!r}"
            )

        return parts[0], parts[1]

    @staticmethod
    def _parse_part(part: str, role: str) -> Decimal:
        # Точный разбор: округляется только результат деления
        try:
            value = Decimal(part)
        except decimal.DecimalException as exc:
            raise FractionParseError(f"Couldn't parse {role} {part!r}") from exc

        if not value.is_finite():
            raise FractionParseError(f"{role} must be finite, got {part!r}")

        return value

    def parse(self, text: str) -> Decimal:
        """Строгий разбор дроби.

        Args:
            text: Строка вида "<numerator> / <denominator>"

        Returns:
            numerator / denominator с точностью config.precision

        Raises:
            FractionParseError: Если вход некорректен или деление невозможно
                (в т.ч. нулевой знаменатель)

        Examples:
            >>> FractionParser().parse("10/2")
            Decimal('5')
        """
        numerator_text, denominator_text = self._split(text)

        context = self._new_context()
        numerator = self._parse_part(numerator_text, "numerator")
        denominator = self._parse_part(denominator_text, "denominator")

        try:
            return context.divide(numerator, denominator)
        except decimal.DecimalException as exc:
            raise FractionParseError(
                f"Couldn't divide {numerator_text!r} by {denominator_text!r}"
            ) from exc

    def try_parse(self, text: Optional[str]) -> Optional[Decimal]:
        """Тотальный разбор дроби: None вместо исключения.

        Returns:
            Decimal при успехе, None при любой ошибке разбора или деления

        Examples:
            >>> FractionParser().try_parse("1/2/3") is None
            True
        """
        try:
            return self.parse(text)
        except FractionParseError as exc:
            logger.debug("Fraction rejected: %s", exc)
            return None


_DEFAULT_PARSER: Final[FractionParser] = FractionParser()


def _parser_for(config: FractionParserConfig | None) -> FractionParser:
    if config is None:
        return _DEFAULT_PARSER
    return FractionParser(config)


def try_parse_fraction(
    text: Optional[str],
    config: FractionParserConfig | None = None,
) -> Optional[Decimal]:
    """
    Попытка разобрать дробь " 1234.45 / 346.456 " в Decimal.

    Никогда не пробрасывает ошибку разбора: некорректный вход, NaN/Infinity,
    нулевой знаменатель → None.

    Args:
        text: Строка дроби (None допускается)
        config: Конфигурация (optional)

    Returns:
        Частное при успехе, иначе None

    Examples:
        >>> try_parse_fraction("10/2")
        Decimal('5')
        >>> try_parse_fraction("1/") is None
        True
    """
    return _parser_for(config).try_parse(text)


def parse_fraction(text: str, config: FractionParserConfig | None = None) -> Decimal:
    """
    Строгий вариант try_parse_fraction.

    Raises:
        FractionParseError: С описанием причины (цепочка от decimal-ошибки)
    """
    return _parser_for(config).parse(text)
