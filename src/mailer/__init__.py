"""
Mailer module for sending summaries through an SMTP relay.
"""

__version__ = "1.0.0"

from .mail_client import MailAuthError, MailClient, MailError
from .recipients import is_valid_address, parse_recipients

__all__ = [
    "MailAuthError",
    "MailClient",
    "MailError",
    "is_valid_address",
    "parse_recipients",
]
