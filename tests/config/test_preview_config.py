"""
Tests for preview configuration loading.

Covers:
- Schema defaults and validation (PreviewConfig)
- Loader (parse_preview_config) -- YAML dict parsing
- End-to-end (get_preview_config) -- bundled and custom YAML files
"""

from __future__ import annotations

import dataclasses
import logging

import pytest
import yaml

from iou_config import PreviewConfig, get_preview_config
from iou_config.loader import compute_checksum, load_yaml_file, parse_preview_config
from iou_kernel.exceptions import ConfigurationError, InvalidPreviewConfigError


# =========================================================================
# 1. Schema
# =========================================================================


class TestPreviewConfigSchema:

    def test_defaults(self):
        config = PreviewConfig()

        assert config.max_preview_length == 83
        assert config.violation_message_max_length == 15
        assert config.default_currency == "USD"
        assert config.partial_transaction_merchant == "(none)"
        assert config.default_merchant == "Request"
        assert config.locale == "en"

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            PreviewConfig().locale = "fr"

    def test_currency_normalized(self):
        assert PreviewConfig(default_currency=" eur ").default_currency == "EUR"

    @pytest.mark.parametrize(
        "overrides,field",
        [
            ({"max_preview_length": 3}, "max_preview_length"),
            ({"violation_message_max_length": -1}, "violation_message_max_length"),
            ({"default_currency": "XYZ"}, "default_currency"),
            ({"locale": ""}, "locale"),
        ],
    )
    def test_invalid_values_rejected(self, overrides, field):
        with pytest.raises(InvalidPreviewConfigError) as exc_info:
            PreviewConfig(**overrides)

        assert exc_info.value.field == field
        assert exc_info.value.code == "INVALID_PREVIEW_CONFIG"
        assert isinstance(exc_info.value, ConfigurationError)

    def test_locale_without_catalog_rejected(self):
        with pytest.raises(InvalidPreviewConfigError) as exc_info:
            PreviewConfig(locale="fr")

        assert exc_info.value.field == "locale"

    def test_unknown_locale_in_yaml_rejected(self):
        with pytest.raises(InvalidPreviewConfigError):
            parse_preview_config({"preview": {"locale": "xx"}})

    def test_empty_placeholder_rejected(self):
        with pytest.raises(InvalidPreviewConfigError):
            PreviewConfig(default_merchant="")


# =========================================================================
# 2. Loader
# =========================================================================


class TestParsePreviewConfig:

    def test_empty_document_gives_defaults(self):
        assert parse_preview_config({}) == PreviewConfig()
        assert parse_preview_config({"preview": None}) == PreviewConfig()

    def test_partial_section(self):
        config = parse_preview_config({"preview": {"max_preview_length": 40, "locale": "en"}})

        assert config.max_preview_length == 40
        assert config.default_currency == "USD"

    def test_unknown_key_rejected(self):
        with pytest.raises(InvalidPreviewConfigError, match="unknown configuration key"):
            parse_preview_config({"preview": {"max_length": 40}})

    def test_section_must_be_mapping(self):
        with pytest.raises(InvalidPreviewConfigError):
            parse_preview_config({"preview": ["max_preview_length"]})

    @pytest.mark.parametrize("value", ["83", True, 8.3])
    def test_int_field_type_checked(self, value):
        with pytest.raises(InvalidPreviewConfigError, match="expected an integer"):
            parse_preview_config({"preview": {"max_preview_length": value}})

    def test_string_field_type_checked(self):
        with pytest.raises(InvalidPreviewConfigError, match="expected a string"):
            parse_preview_config({"preview": {"default_currency": 840}})

    def test_checksum_is_deterministic(self):
        assert compute_checksum(PreviewConfig()) == compute_checksum(PreviewConfig())
        assert compute_checksum(PreviewConfig()) != compute_checksum(
            PreviewConfig(max_preview_length=40)
        )


# =========================================================================
# 3. End-to-end
# =========================================================================


class TestGetPreviewConfig:

    def test_bundled_defaults_match_schema_defaults(self):
        assert get_preview_config() == PreviewConfig()

    def test_custom_file(self, tmp_path):
        path = tmp_path / "preview.yaml"
        path.write_text(
            yaml.safe_dump({"preview": {"default_currency": "GBP", "max_preview_length": 50}}),
            encoding="utf-8",
        )

        config = get_preview_config(path)

        assert config.default_currency == "GBP"
        assert config.max_preview_length == 50

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            get_preview_config(tmp_path / "absent.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("preview: [unclosed", encoding="utf-8")

        with pytest.raises(yaml.YAMLError):
            load_yaml_file(path)

    def test_emits_config_trace(self, caplog):
        caplog.set_level(logging.INFO, logger="iou_kernel.config")

        config = get_preview_config()

        traces = [r for r in caplog.records if r.getMessage() == "IOU_CONFIG_TRACE"]
        assert len(traces) == 1
        assert traces[0].checksum == compute_checksum(config)
