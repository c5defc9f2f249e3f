"""
models/requests.py
------------------
Validated request values derived from raw command arguments.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


class InvalidArgumentsError(ValueError):
    """Raised when command arguments do not match the expected form."""


@dataclass(frozen=True)
class CurrencyRequest:
    """
    A currency conversion request parsed from ``/currency`` arguments.

    Attributes:
        amount: Positive, finite amount to convert.
        from_code: Source currency code, uppercased (e.g. "USD").
        to_code: Target currency code, uppercased (e.g. "EUR").

    Codes are not checked against a list of known currencies; the
    upstream API reports unknown codes itself.
    """
    amount: Decimal
    from_code: str
    to_code: str

    @classmethod
    def parse(cls, raw_args: str) -> "CurrencyRequest":
        """
        Parse ``"<amount> <from> <to>"``.

        Raises:
            InvalidArgumentsError: If there are not exactly three tokens or
                the first one is not a positive finite number.
        """
        parts = (raw_args or "").split()
        if len(parts) != 3:
            raise InvalidArgumentsError(f"expected 3 arguments, got {len(parts)}")

        try:
            amount = Decimal(parts[0])
        except InvalidOperation:
            raise InvalidArgumentsError(f"amount is not a number: {parts[0]!r}") from None

        if not amount.is_finite() or amount <= 0:
            raise InvalidArgumentsError(f"amount must be positive and finite: {parts[0]!r}")

        return cls(amount=amount, from_code=parts[1].upper(), to_code=parts[2].upper())

    def __str__(self) -> str:
        return f"{self.amount} {self.from_code} -> {self.to_code}"
