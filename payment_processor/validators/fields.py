"""Syntactic checks for the tokens captured from an instruction."""

from __future__ import annotations

import re
import string

from payment_processor import messages
from payment_processor.api.errors import InstructionRuleError
from payment_processor.constants import SUPPORTED_CURRENCIES, StatusCode

ACCOUNT_ID_CHARS = frozenset(string.ascii_letters + string.digits + "-.@")
DIGITS_PATTERN = re.compile(r"[0-9]+")
DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def validate_amount(raw: str) -> int:
    """Return the amount as a positive integer.

    Negative and fractional tokens are rejected on their syntax alone.
    """

    token = raw.strip()
    if not token or "-" in token or "." in token or not DIGITS_PATTERN.fullmatch(token):
        raise InstructionRuleError(StatusCode.INVALID_AMOUNT, messages.INVALID_AMOUNT)

    try:
        amount = int(token)
    except ValueError as exc:
        # Digit strings past the interpreter conversion limit.
        raise InstructionRuleError(StatusCode.INVALID_AMOUNT, messages.INVALID_AMOUNT) from exc
    if amount <= 0:
        raise InstructionRuleError(StatusCode.INVALID_AMOUNT, messages.INVALID_AMOUNT)
    return amount


def validate_currency(raw: str) -> str:
    """Upper-case the currency token and check it against the whitelist."""

    currency = raw.upper()
    if currency not in SUPPORTED_CURRENCIES:
        raise InstructionRuleError(StatusCode.UNSUPPORTED_CURRENCY, messages.UNSUPPORTED_CURRENCY)
    return currency


def is_valid_account_id(value: str) -> bool:
    return bool(value) and all(char in ACCOUNT_ID_CHARS for char in value)


def ensure_valid_account_id(value: str) -> None:
    """Validate the account id character set."""

    if not is_valid_account_id(value):
        raise InstructionRuleError(StatusCode.INVALID_ACCOUNT_ID, messages.INVALID_ACCOUNT_ID)


def ensure_distinct_accounts(debit_account: str, credit_account: str) -> None:
    """Validate that the transfer does not target its own source account."""

    if debit_account == credit_account:
        raise InstructionRuleError(StatusCode.SAME_ACCOUNT, messages.SAME_ACCOUNT)


def is_valid_date_format(value: str) -> bool:
    """Check the YYYY-MM-DD shape and field ranges.

    Calendar validity is not checked, so 2025-02-30 passes.
    """

    match = DATE_PATTERN.fullmatch(value)
    if not match:
        return False
    year, month, day = (int(part) for part in match.groups())
    return 1000 <= year <= 9999 and 1 <= month <= 12 and 1 <= day <= 31
