import numbers
import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Union


class AmountParser:
    """
    Parser for amounts typed into an expense form.

    Supports:
    - Plain numbers: 12, 12.5, .75
    - Thousand separators: 1,234.56
    - European decimal comma: 12,50
    - A leading currency symbol: $12.50, € 3
    - Numeric values (int, float, Decimal and other real numbers)

    Amounts are returned as Decimal so that sums of cent values stay exact.
    """

    CURRENCY_SYMBOLS = "$€£¥₹"

    # The whole input must be a single amount; "12abc" is rejected
    AMOUNT_PATTERN = re.compile(
        r"""
        ^
        (?P<number>
            \d{1,3}(?:,\d{3})+(?:\.\d+)?    # Numbers with thousand separators
            |
            \d+(?:[.,]\d+)?                 # Simple numbers with optional decimal
            |
            [.,]\d+                         # Leading decimal point
        )
        $
        """,
        re.VERBOSE,
    )

    @classmethod
    def parse(cls, value: Union[str, numbers.Real, None]) -> Optional[Decimal]:
        """
        Parse an amount and return the numeric value.

        Args:
            value: Raw amount (e.g., "12.50", "1,234", 7, Decimal("3.10"))

        Returns:
            Decimal value of the amount, or None if it is not a finite number
        """
        if value is None or isinstance(value, bool):
            return None

        if isinstance(value, (numbers.Real, Decimal)):
            return cls._from_number(value)

        if not isinstance(value, str):
            return None

        text = value.strip().lstrip(cls.CURRENCY_SYMBOLS).strip()
        if not text:
            return None

        match = cls.AMOUNT_PATTERN.match(text)
        if not match:
            return None

        return cls._parse_number(match.group("number"))

    @classmethod
    def _from_number(cls, value) -> Optional[Decimal]:
        """Convert a numeric value to Decimal via its shortest text form."""
        if isinstance(value, Decimal):
            number = value
        elif isinstance(value, int):
            number = Decimal(value)
        else:
            # str() keeps 0.1 as Decimal("0.1") rather than its binary expansion
            try:
                number = Decimal(str(float(value)))
            except (OverflowError, ValueError):
                return None

        return number if number.is_finite() else None

    @classmethod
    def _parse_number(cls, number_str: str) -> Optional[Decimal]:
        """
        Parse a number string handling separator conventions.

        Handles:
        - Western format: 1,234.56 (comma as thousand, dot as decimal)
        - Thousands only: 1,234 -> 1234
        - European decimal: 12,50 -> 12.5
        """
        commas = number_str.count(",")

        if commas > 1 or (commas == 1 and "." in number_str):
            normalized = number_str.replace(",", "")
        elif commas == 1:
            parts = number_str.split(",")
            if len(parts[1]) == 3 and parts[0]:
                # Thousand separator
                normalized = number_str.replace(",", "")
            else:
                # European decimal format
                normalized = number_str.replace(",", ".")
        else:
            normalized = number_str

        try:
            return Decimal(normalized)
        except InvalidOperation:
            return None
