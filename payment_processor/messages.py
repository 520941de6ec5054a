"""Human-readable texts attached to instruction outcomes."""

from types import MappingProxyType
from typing import Mapping

from payment_processor.constants import StatusCode

INVALID_AMOUNT = "Amount must be a positive integer"
CURRENCY_MISMATCH = "Account currency mismatch"
UNSUPPORTED_CURRENCY = "Unsupported currency. Only NGN, USD, GBP, and GHS are supported"
INSUFFICIENT_FUNDS = "Insufficient funds in debit account"
SAME_ACCOUNT = "Debit and credit accounts cannot be the same"
ACCOUNT_NOT_FOUND = "Account not found"
INVALID_ACCOUNT_ID = "Invalid account ID format"
INVALID_DATE = "Invalid date format. Expected YYYY-MM-DD"
MISSING_KEYWORD = "Missing required keyword"
INVALID_KEYWORD_ORDER = "Invalid keyword order"
MALFORMED_INSTRUCTION = "Malformed instruction: unable to parse keywords"
TRANSACTION_SUCCESSFUL = "Transaction executed successfully"
TRANSACTION_PENDING = "Transaction scheduled for future execution"

STATUS_MESSAGES: Mapping[StatusCode, str] = MappingProxyType(
    {
        StatusCode.INVALID_AMOUNT: INVALID_AMOUNT,
        StatusCode.CURRENCY_MISMATCH: CURRENCY_MISMATCH,
        StatusCode.UNSUPPORTED_CURRENCY: UNSUPPORTED_CURRENCY,
        StatusCode.INSUFFICIENT_FUNDS: INSUFFICIENT_FUNDS,
        StatusCode.SAME_ACCOUNT: SAME_ACCOUNT,
        StatusCode.ACCOUNT_NOT_FOUND: ACCOUNT_NOT_FOUND,
        StatusCode.INVALID_ACCOUNT_ID: INVALID_ACCOUNT_ID,
        StatusCode.INVALID_DATE: INVALID_DATE,
        StatusCode.MISSING_KEYWORD: MISSING_KEYWORD,
        StatusCode.INVALID_KEYWORD_ORDER: INVALID_KEYWORD_ORDER,
        StatusCode.MALFORMED: MALFORMED_INSTRUCTION,
        StatusCode.SUCCESS: TRANSACTION_SUCCESSFUL,
        StatusCode.PENDING: TRANSACTION_PENDING,
    }
)


def message_for(code: StatusCode) -> str:
    """Return the catalog text for a status code."""

    return STATUS_MESSAGES[code]
