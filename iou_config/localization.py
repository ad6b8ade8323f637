"""
Translation catalogs (``iou_config.localization``).

Responsibility
--------------
Loads ``locales/<locale>.yaml`` into a flat ``{dotted.key: template}``
catalog and exposes it through :class:`Localizer`, a callable matching the
translation contract the preview engine consumes::

    translate("iou.amountEach", {"amount": "$15.00"})  ->  "$15.00 each"

Failure modes
-------------
* Unknown locale  -> ``UnsupportedLocaleError``.
* Catalog that is not a nested mapping of strings  ->
  ``TranslationCatalogError``.
* Missing key at lookup time  -> warning logged, the key itself returned.
  A missing string degrades the display; it never breaks a render.
"""

from __future__ import annotations


from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from iou_kernel.exceptions import TranslationCatalogError, UnsupportedLocaleError
from iou_kernel.logging_config import get_logger

logger = get_logger("config.localization")

_LOCALES_DIR = Path(__file__).parent / "locales"


class _KeepMissing(dict):
    """Leaves ``{name}`` in place when a template parameter is not supplied."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def flatten_catalog(data: Mapping[str, Any], prefix: str = "", path: str = "<memory>") -> dict[str, str]:
    """Flatten nested catalog sections into dotted keys."""
    flat: dict[str, str] = {}
    for key, value in data.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(flatten_catalog(value, prefix=f"{dotted}.", path=path))
        elif isinstance(value, str):
            flat[dotted] = value
        else:
            raise TranslationCatalogError(path, f"value of '{dotted}' is not a string")
    return flat


def has_catalog(locale: str, locales_dir: Path = _LOCALES_DIR) -> bool:
    return (locales_dir / f"{locale}.yaml").is_file()


@lru_cache(maxsize=32)
def load_catalog(locale: str, locales_dir: Path = _LOCALES_DIR) -> Mapping[str, str]:
    """Read and flatten the catalog for ``locale``; cached per process."""
    path = locales_dir / f"{locale}.yaml"
    if not has_catalog(locale, locales_dir):
        raise UnsupportedLocaleError(locale)

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise TranslationCatalogError(str(path), str(exc)) from exc

    if not isinstance(data, Mapping):
        raise TranslationCatalogError(str(path), "top level must be a mapping")

    catalog = flatten_catalog(data, path=str(path))
    logger.info(
        "translation_catalog_loaded",
        extra={"locale": locale, "key_count": len(catalog)},
    )
    return catalog


class Localizer:
    """Callable translator over one locale's catalog."""

    def __init__(self, catalog: Mapping[str, str], locale: str = "en"):
        self._catalog = dict(catalog)
        self.locale = locale

    @classmethod
    def for_locale(cls, locale: str = "en") -> Localizer:
        return cls(load_catalog(locale), locale)

    def has_key(self, key: str) -> bool:
        return key in self._catalog

    def __call__(self, key: str, params: Mapping[str, Any] | None = None) -> str:
        template = self._catalog.get(key)
        if template is None:
            logger.warning(
                "translation_key_missing",
                extra={"locale": self.locale, "translation_key": key},
            )
            return key
        if not params:
            return template
        return template.format_map(_KeepMissing(params))
