"""
Typed exception hierarchy for the IOU preview packages.

The preview engine itself never raises: every missing input has a
documented default. These exceptions cover the tooling around it
(configuration loading, translation catalogs, strict currency validation)
where a bad input is a programming or deployment error.

Every exception carries a ``code`` class attribute (machine-readable,
stable across message rewording) and stores its context as attributes:

    IOUPreviewError (base)
    |
    +-- ConfigurationError
    |   +-- InvalidPreviewConfigError
    |
    +-- LocalizationError
    |   +-- TranslationCatalogError
    |   +-- UnsupportedLocaleError
    |
    +-- CurrencyError
        +-- InvalidCurrencyError

Callers catch by type and read attributes; they never parse messages:

    try:
        config = load_preview_config(path)
    except InvalidPreviewConfigError as e:
        logger.error("bad_preview_config", extra={"field": e.field})
"""


class IOUPreviewError(Exception):
    """Base exception for all IOU preview errors."""

    code: str = "IOU_PREVIEW_ERROR"


# Configuration


class ConfigurationError(IOUPreviewError):
    """Base exception for configuration errors."""

    code: str = "CONFIGURATION_ERROR"


class InvalidPreviewConfigError(ConfigurationError):
    """A preview configuration value failed validation."""

    code: str = "INVALID_PREVIEW_CONFIG"

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid preview config field '{field}': {reason}")


# Localization


class LocalizationError(IOUPreviewError):
    """Base exception for translation catalog errors."""

    code: str = "LOCALIZATION_ERROR"


class TranslationCatalogError(LocalizationError):
    """A translation catalog file is malformed."""

    code: str = "TRANSLATION_CATALOG_INVALID"

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Translation catalog {path} is invalid: {reason}")


class UnsupportedLocaleError(LocalizationError):
    """No translation catalog ships for the requested locale."""

    code: str = "UNSUPPORTED_LOCALE"

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"No translation catalog for locale '{locale}'")


# Currency


class CurrencyError(IOUPreviewError):
    """Base exception for currency-related errors."""

    code: str = "CURRENCY_ERROR"


class InvalidCurrencyError(CurrencyError):
    """Invalid ISO 4217 currency code provided."""

    code: str = "INVALID_CURRENCY"

    def __init__(self, currency: object):
        self.currency = currency
        super().__init__(f"Invalid ISO 4217 currency code: {currency!r}")
