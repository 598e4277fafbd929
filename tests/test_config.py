"""Tests for converter options and their environment overrides."""

import logging

from dmn_converter.config import (
    DEFAULTS,
    MODEL_NAMESPACE,
    ConverterOptions,
    UnknownKeyPolicy,
    unknown_key_policy_from_env,
)


def test_defaults_without_env(monkeypatch):
    monkeypatch.delenv("DMN_CONVERTER_UNKNOWN_KEY_POLICY", raising=False)
    monkeypatch.delenv("DMN_CONVERTER_INFER_TYPES", raising=False)
    options = ConverterOptions()
    assert options.unknown_key_policy == UnknownKeyPolicy.WARN
    assert options.infer_types is True
    assert options.namespace == MODEL_NAMESPACE == DEFAULTS["namespace"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DMN_CONVERTER_UNKNOWN_KEY_POLICY", "ERROR")
    monkeypatch.setenv("DMN_CONVERTER_INFER_TYPES", "no")
    options = ConverterOptions()
    assert options.unknown_key_policy == UnknownKeyPolicy.ERROR
    assert options.infer_types is False


def test_invalid_policy_env_falls_back_to_default(monkeypatch, caplog):
    monkeypatch.setenv("DMN_CONVERTER_UNKNOWN_KEY_POLICY", "warning")
    with caplog.at_level(logging.WARNING, logger="dmn_converter.config"):
        policy = unknown_key_policy_from_env()
    assert policy == DEFAULTS["unknown_key_policy"]
    assert any("DMN_CONVERTER_UNKNOWN_KEY_POLICY" in r.getMessage() for r in caplog.records)
    assert ConverterOptions().unknown_key_policy == UnknownKeyPolicy.WARN


def test_explicit_option_beats_env(monkeypatch):
    monkeypatch.setenv("DMN_CONVERTER_UNKNOWN_KEY_POLICY", "error")
    assert ConverterOptions(unknown_key_policy="ignore").unknown_key_policy == UnknownKeyPolicy.IGNORE
