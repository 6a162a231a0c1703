"""Currency and money models"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ..data.currencies import CurrencyCode, get_currency_format


def format_money(amount: int, currency: "Currency") -> str:
    """
    Format an amount in minor units for display.

    Examples:
        12345 USD -> "$123.45"
        1000 JPY -> "¥1,000"
        123456 EUR -> "€1.234,56"
    """
    digits = currency.decimal_digits
    sign = "-" if amount < 0 else ""
    whole, fraction = divmod(abs(amount), 10 ** digits)

    number = f"{whole:,}".replace(",", currency.thousands_separator)
    if digits > 0:
        number = f"{number}{currency.decimal_separator}{fraction:0{digits}d}"

    return f"{sign}{currency.symbol}{number}"


class CurrencyInput(BaseModel):
    """Partial currency details supplied by a caller"""
    code: Optional[CurrencyCode] = None
    symbol: Optional[str] = None
    thousands_separator: Optional[str] = None
    decimal_separator: Optional[str] = None
    decimal_digits: Optional[int] = Field(default=None, ge=0, le=8)


class Currency(BaseModel):
    """Formatting rules for a monetary value"""

    model_config = ConfigDict(frozen=True)

    code: CurrencyCode = CurrencyCode.USD
    symbol: str = "$"
    thousands_separator: str = ","
    decimal_separator: str = "."
    decimal_digits: int = Field(default=2, ge=0)

    @classmethod
    def for_code(cls, code: CurrencyCode) -> "Currency":
        """Build a currency with the default formatting for a code"""
        fmt = get_currency_format(code)
        return cls(
            code=code,
            symbol=fmt.symbol,
            thousands_separator=fmt.thousands_separator,
            decimal_separator=fmt.decimal_separator,
            decimal_digits=fmt.decimal_digits,
        )

    def apply(self, update: Optional[CurrencyInput]) -> "Currency":
        """
        Return a copy with the supplied fields applied.

        Switching to a different code starts over from that code's
        defaults before the explicit fields are laid on top.
        """
        if update is None:
            return self

        base = self
        if update.code is not None and update.code != self.code:
            base = Currency.for_code(update.code)

        overrides = update.model_dump(exclude_none=True, exclude={"code"})
        if not overrides:
            return base
        return Currency(**{**base.model_dump(), **overrides})


class Money(BaseModel):
    """An amount in minor units paired with its currency"""
    amount: int
    currency: Currency

    @computed_field
    @property
    def formatted(self) -> str:
        return format_money(self.amount, self.currency)
