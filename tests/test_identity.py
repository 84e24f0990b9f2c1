"""Tests for the name grammar shared by all tag kinds."""

import pytest

from juju_names.identity import is_machine, is_service, is_unit


@pytest.mark.parametrize("name", [
    "mysql", "my-sql", "wordpress2", "a", "mysql-v2", "my-2sql"])
def test_valid_service(name):
    assert is_service(name)


@pytest.mark.parametrize("name", [
    "", "MySQL", "2mysql", "mysql-", "-mysql", "mysql-2", "my_sql",
    "my--sql", "mysql/0", "mysql\n"])
def test_invalid_service(name):
    assert not is_service(name)


@pytest.mark.parametrize("name", ["0", "7", "42", "0/lxc/1", "1/kvm/0/lxc/3"])
def test_valid_machine(name):
    assert is_machine(name)


@pytest.mark.parametrize("name", [
    "", "01", "-1", "0/lxc", "0/lxc/01", "0/LXC/1", "machine-0", "0\n"])
def test_invalid_machine(name):
    assert not is_machine(name)


def test_unit():
    assert is_unit("mysql/0")
    assert is_unit("my-sql/12")
    assert not is_unit("mysql/01")
    assert not is_unit("mysql/0/1")
    assert not is_unit("mysql/0\n")


def test_non_string_input():
    for value in (None, 0, b"mysql/0", ["mysql/0"]):
        assert not is_unit(value)
        assert not is_service(value)
        assert not is_machine(value)
