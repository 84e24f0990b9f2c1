import argparse

import pytest
import yaml

from juju_names.config import Config
from juju_names.exceptions import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("JUJU_NAMES_FORMAT", raising=False)
    monkeypatch.delenv("JUJU_NAMES_VERBOSE", raising=False)


def make_config(**kw):
    options = dict(verbose=False, format=None)
    options.update(kw)
    return Config(argparse.Namespace(**options))


def test_defaults():
    config = make_config()
    assert config.verbose is False
    assert config.output_format == "json"


def test_verbose_option():
    assert make_config(verbose=True).verbose


@pytest.mark.parametrize("value, expected", [
    ("1", True), ("true", True), ("YES", True), ("0", False), ("", False)])
def test_verbose_env(monkeypatch, value, expected):
    monkeypatch.setenv("JUJU_NAMES_VERBOSE", value)
    assert make_config().verbose is expected


def test_format_env(monkeypatch):
    monkeypatch.setenv("JUJU_NAMES_FORMAT", "YAML")
    assert make_config().output_format == "yaml"


def test_format_option_wins(monkeypatch):
    monkeypatch.setenv("JUJU_NAMES_FORMAT", "yaml")
    assert make_config(format="json").output_format == "json"


def test_unknown_format(monkeypatch):
    monkeypatch.setenv("JUJU_NAMES_FORMAT", "xml")
    with pytest.raises(ConfigError):
        make_config().output_format


def test_dump_json():
    assert make_config().dump(["a", "b"]) == '[\n  "a",\n  "b"\n]'


def test_dump_yaml():
    result = {"kind": "unit", "id": "mysql/0"}
    output = make_config(format="yaml").dump(result)
    assert output == "id: mysql/0\nkind: unit"
    assert yaml.safe_load(output) == result
