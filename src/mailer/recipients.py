"""
Recipient list parsing.
"""

from typing import List

import email_validator
from email_validator import EmailNotValidError, validate_email

# Syntax-only filtering: reserved names such as corp.local or lab.test are
# accepted like any other dotted domain. validate_email reads this list on
# every call.
email_validator.SPECIAL_USE_DOMAIN_NAMES = []


def is_valid_address(address: str) -> bool:
    """Syntax-only e-mail check; no DNS lookups."""
    try:
        validate_email(address, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def parse_recipients(raw: str) -> List[str]:
    """
    Split a comma-separated recipient string into valid addresses.

    Tokens are trimmed and kept in input order. Tokens that fail syntax
    validation are dropped without being reported.
    """
    tokens = (token.strip() for token in raw.split(","))
    return [token for token in tokens if token and is_valid_address(token)]
