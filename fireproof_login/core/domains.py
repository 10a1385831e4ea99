"""Domain Names: pure validation and normalization of fireproofable hosts.

Invariants:
    - normalize_domain lowercases, strips whitespace and one trailing dot
    - is_valid_domain accepts dotted host names (labels 1-63 chars of
      letters, digits, hyphens, not starting/ending with a hyphen) and
      "localhost"; rejects schemes, paths and ports
"""

import re

_LABEL = re.compile(r"^(?!-)[a-z0-9-]{1,63}(?<!-)$")
_MAX_DOMAIN_LENGTH = 253


def normalize_domain(domain: str) -> str:
    domain = domain.strip().lower()
    if domain.endswith("."):
        domain = domain[:-1]
    return domain


def is_valid_domain(domain: str) -> bool:
    """True if `domain` (already normalized) is a plausible host name."""
    if not domain or len(domain) > _MAX_DOMAIN_LENGTH:
        return False
    if domain == "localhost":
        return True
    labels = domain.split(".")
    if len(labels) < 2:
        return False
    return all(_LABEL.match(label) for label in labels)
