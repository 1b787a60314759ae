"""Numeric rounding filter."""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
import logging

from ..constants import DEFAULT_ROUND_PRECISION, FILTER_ROUND, MAX_ROUND_PRECISION
from .base_handler import FilterHandler

_LOGGER = logging.getLogger(__name__)


def format_decimal(number: Decimal) -> str:
    """Render a decimal without exponent or trailing fractional zeros."""
    text = format(number, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


class RoundFilter(FilterHandler):
    """Round numeric text to a number of decimal places, half away from zero.

    ``[[sensor.temperature.state|round(1)]]`` turns ``22.56`` into ``22.6``.
    Values that are not numbers are returned unchanged.
    """

    name = FILTER_ROUND

    def __init__(self, default_precision: int = DEFAULT_ROUND_PRECISION) -> None:
        """Initialize the filter with the precision used when none is given."""
        self._default_precision = default_precision

    def _parse_precision(self, args: Sequence[str]) -> int:
        if not args:
            return self._default_precision
        try:
            precision = int(args[0].strip())
        except ValueError:
            _LOGGER.debug("Invalid round precision '%s', using %d", args[0], self._default_precision)
            return self._default_precision
        if abs(precision) > MAX_ROUND_PRECISION:
            return self._default_precision
        return precision

    def apply(self, value: str, args: Sequence[str]) -> str:
        if "_" in value:
            # Digit grouping is not a number here
            return value
        try:
            number = Decimal(value)
        except InvalidOperation:
            return value
        if not number.is_finite():
            return value

        quantum = Decimal(1).scaleb(-self._parse_precision(args))
        try:
            rounded = number.quantize(quantum, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            return value
        return format_decimal(rounded)
