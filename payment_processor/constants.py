"""Immutable status codes and currency whitelist for payment instructions."""

from __future__ import annotations

from enum import Enum


class StatusCode(str, Enum):
    """Stable status codes reported in every instruction outcome."""

    INVALID_AMOUNT = "AM01"
    CURRENCY_MISMATCH = "CU01"
    UNSUPPORTED_CURRENCY = "CU02"
    INSUFFICIENT_FUNDS = "AC01"
    SAME_ACCOUNT = "AC02"
    ACCOUNT_NOT_FOUND = "AC03"
    INVALID_ACCOUNT_ID = "AC04"
    INVALID_DATE = "DT01"
    # Reserved: the grammar collapses every structural failure into MALFORMED.
    MISSING_KEYWORD = "SY01"
    INVALID_KEYWORD_ORDER = "SY02"
    MALFORMED = "SY03"
    SUCCESS = "AP00"
    PENDING = "AP02"


class TransferStatus(str, Enum):
    """Lifecycle status of a simulated transfer."""

    SUCCESSFUL = "successful"
    PENDING = "pending"
    FAILED = "failed"


class InstructionType(str, Enum):
    """Dialect the instruction was written in."""

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


SUPPORTED_CURRENCIES: frozenset[str] = frozenset({"NGN", "USD", "GBP", "GHS"})
