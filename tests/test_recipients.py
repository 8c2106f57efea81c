"""
Unit tests for recipient parsing in src/mailer/recipients.py.
"""

import pytest

from mailer import is_valid_address, parse_recipients


def test_filters_and_trims():
    assert parse_recipients("a@x.com, not-an-email, b@y.com") == ["a@x.com", "b@y.com"]


def test_keeps_input_order_and_duplicates():
    assert parse_recipients("z@x.com,a@x.com,z@x.com") == ["z@x.com", "a@x.com", "z@x.com"]


@pytest.mark.parametrize("raw", ["", " , ,", "nope", "a@, @b.com, a b@c.com"])
def test_nothing_valid(raw):
    assert parse_recipients(raw) == []


@pytest.mark.parametrize("address", ["alice@mail.org", "first.last+tag@sub.domain.co"])
def test_valid_addresses(address):
    assert is_valid_address(address)


@pytest.mark.parametrize("address", ["plain", "two@@x.com", "x@", "spaces in@x.com"])
def test_invalid_addresses(address):
    assert not is_valid_address(address)


def test_reserved_domains_are_kept():
    assert parse_recipients("alice@corp.local, bob@lab.test, b@y.com") == [
        "alice@corp.local",
        "bob@lab.test",
        "b@y.com",
    ]


def test_dotless_domain_is_dropped():
    assert parse_recipients("root@localhost, b@y.com") == ["b@y.com"]
