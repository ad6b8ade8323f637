"""Currency -- ISO 4217 registry and minor-unit display formatting."""

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

from iou_kernel.exceptions import InvalidCurrencyError


@dataclass(frozen=True)
class CurrencyInfo:
    """Information about a single ISO 4217 currency."""

    code: str
    decimal_places: int
    symbol: str
    name: str

    @property
    def has_own_symbol(self) -> bool:
        """False when the currency is displayed by its code (e.g. ``SEK 10.00``)."""
        return self.symbol != self.code


class CurrencyRegistry:
    """Registry of the ISO 4217 currencies a request can be made in."""

    _CURRENCIES: ClassVar[dict[str, CurrencyInfo]] = {
        # Two decimal currencies with a dedicated symbol
        "USD": CurrencyInfo("USD", 2, "$", "US Dollar"),
        "EUR": CurrencyInfo("EUR", 2, "€", "Euro"),
        "GBP": CurrencyInfo("GBP", 2, "£", "Pound Sterling"),
        "CAD": CurrencyInfo("CAD", 2, "CA$", "Canadian Dollar"),
        "AUD": CurrencyInfo("AUD", 2, "A$", "Australian Dollar"),
        "NZD": CurrencyInfo("NZD", 2, "NZ$", "New Zealand Dollar"),
        "MXN": CurrencyInfo("MXN", 2, "MX$", "Mexican Peso"),
        "BRL": CurrencyInfo("BRL", 2, "R$", "Brazilian Real"),
        "HKD": CurrencyInfo("HKD", 2, "HK$", "Hong Kong Dollar"),
        "TWD": CurrencyInfo("TWD", 2, "NT$", "New Taiwan Dollar"),
        "CNY": CurrencyInfo("CNY", 2, "CN¥", "Chinese Yuan"),
        "INR": CurrencyInfo("INR", 2, "₹", "Indian Rupee"),
        "ILS": CurrencyInfo("ILS", 2, "₪", "Israeli New Shekel"),
        "PHP": CurrencyInfo("PHP", 2, "₱", "Philippine Peso"),
        # Two decimal currencies displayed by code
        "CHF": CurrencyInfo("CHF", 2, "CHF", "Swiss Franc"),
        "SEK": CurrencyInfo("SEK", 2, "SEK", "Swedish Krona"),
        "NOK": CurrencyInfo("NOK", 2, "NOK", "Norwegian Krone"),
        "DKK": CurrencyInfo("DKK", 2, "DKK", "Danish Krone"),
        "PLN": CurrencyInfo("PLN", 2, "PLN", "Polish Zloty"),
        "CZK": CurrencyInfo("CZK", 2, "CZK", "Czech Koruna"),
        "SGD": CurrencyInfo("SGD", 2, "SGD", "Singapore Dollar"),
        "ZAR": CurrencyInfo("ZAR", 2, "ZAR", "South African Rand"),
        "THB": CurrencyInfo("THB", 2, "THB", "Thai Baht"),
        "TRY": CurrencyInfo("TRY", 2, "TRY", "Turkish Lira"),
        "AED": CurrencyInfo("AED", 2, "AED", "UAE Dirham"),
        "SAR": CurrencyInfo("SAR", 2, "SAR", "Saudi Riyal"),
        "EGP": CurrencyInfo("EGP", 2, "EGP", "Egyptian Pound"),
        "NGN": CurrencyInfo("NGN", 2, "NGN", "Nigerian Naira"),
        "IDR": CurrencyInfo("IDR", 2, "IDR", "Indonesian Rupiah"),
        # Zero decimal currencies
        "JPY": CurrencyInfo("JPY", 0, "¥", "Japanese Yen"),
        "KRW": CurrencyInfo("KRW", 0, "₩", "South Korean Won"),
        "VND": CurrencyInfo("VND", 0, "₫", "Vietnamese Dong"),
        "CLP": CurrencyInfo("CLP", 0, "CLP", "Chilean Peso"),
        "ISK": CurrencyInfo("ISK", 0, "ISK", "Icelandic Krona"),
        "UGX": CurrencyInfo("UGX", 0, "UGX", "Ugandan Shilling"),
        # Three decimal currencies
        "BHD": CurrencyInfo("BHD", 3, "BHD", "Bahraini Dinar"),
        "JOD": CurrencyInfo("JOD", 3, "JOD", "Jordanian Dinar"),
        "KWD": CurrencyInfo("KWD", 3, "KWD", "Kuwaiti Dinar"),
        "OMR": CurrencyInfo("OMR", 3, "OMR", "Omani Rial"),
        "TND": CurrencyInfo("TND", 3, "TND", "Tunisian Dinar"),
    }

    # Unknown codes render with the common two-decimal precision.
    DEFAULT_DECIMAL_PLACES: ClassVar[int] = 2
    DEFAULT_CURRENCY: ClassVar[str] = "USD"

    @classmethod
    def is_valid(cls, code: str) -> bool:
        """Check if a currency code is known."""
        if not code or not isinstance(code, str):
            return False
        return code.upper().strip() in cls._CURRENCIES

    @classmethod
    def get_info(cls, code: str | None) -> CurrencyInfo | None:
        """Get currency information by code."""
        if not code or not isinstance(code, str):
            return None
        return cls._CURRENCIES.get(code.upper().strip())

    @classmethod
    def get_decimal_places(cls, code: str | None) -> int:
        info = cls.get_info(code)
        return info.decimal_places if info else cls.DEFAULT_DECIMAL_PLACES

    @classmethod
    def get_currency_unit(cls, code: str | None) -> int:
        """Number of minor units in one major unit (100 for USD, 1 for JPY)."""
        return 10 ** cls.get_decimal_places(code)

    @classmethod
    def validate(cls, code: str) -> str:
        """Validate and normalize a currency code.

        Raises:
            InvalidCurrencyError: if the code is empty, not three letters,
                or not registered.
        """
        if not code or not isinstance(code, str):
            raise InvalidCurrencyError(code)

        normalized = code.upper().strip()
        if len(normalized) != 3 or normalized not in cls._CURRENCIES:
            raise InvalidCurrencyError(code)

        return normalized

    @classmethod
    def all_codes(cls) -> frozenset[str]:
        return frozenset(cls._CURRENCIES.keys())


def convert_to_display_string(
    amount: int | None = 0,
    currency: str | None = CurrencyRegistry.DEFAULT_CURRENCY,
) -> str:
    """Render an amount in minor units for display.

    ``2500, "USD"`` -> ``"$25.00"``; ``1500, "JPY"`` -> ``"¥1,500"``;
    ``1000, "SEK"`` -> ``"SEK 10.00"``. Unknown codes are shown by code
    with two decimals. Never raises.
    """
    minor_units = int(amount or 0)
    code = (currency or CurrencyRegistry.DEFAULT_CURRENCY).upper().strip()
    info = CurrencyRegistry.get_info(code)
    decimal_places = info.decimal_places if info else CurrencyRegistry.DEFAULT_DECIMAL_PLACES

    major_units = Decimal(abs(minor_units)).scaleb(-decimal_places)
    number = f"{major_units:,.{decimal_places}f}"
    sign = "-" if minor_units < 0 else ""

    if info is not None and info.has_own_symbol:
        return f"{sign}{info.symbol}{number}"
    return f"{sign}{code} {number}"
