"""Domain Names: normalization and validation."""

import pytest

from fireproof_login.core.domains import is_valid_domain, normalize_domain


def test_normalize_lowercases_and_strips():
    assert normalize_domain("  WWW.Example.COM. ") == "www.example.com"


@pytest.mark.parametrize("domain", [
    "example.com", "sub.example.co.uk", "xn--bcher-kva.example", "localhost",
    "a-b.example.org",
])
def test_valid_domains(domain):
    assert is_valid_domain(domain)


@pytest.mark.parametrize("domain", [
    "", "com", "example..com", "-bad.example.com", "bad-.example.com",
    "https://example.com", "example.com/path", "example.com:443",
    "exa mple.com", "a" * 64 + ".com",
])
def test_invalid_domains(domain):
    assert not is_valid_domain(domain)
