"""Business rules evaluated against the caller-supplied accounts."""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from payment_processor import messages
from payment_processor.api.errors import InstructionRuleError
from payment_processor.constants import StatusCode
from payment_processor.schemas.instruction import Account
from payment_processor.validators.fields import is_valid_date_format


def find_account(accounts: Sequence[Account], account_id: str) -> Account:
    """Return the account with exactly ``account_id``."""

    for account in accounts:
        if account.id == account_id:
            return account
    raise InstructionRuleError(StatusCode.ACCOUNT_NOT_FOUND, messages.ACCOUNT_NOT_FOUND)


def ensure_matching_currencies(debit: Account, credit: Account, instruction_currency: str) -> None:
    """Both accounts and the instruction must share one currency."""

    debit_currency = debit.currency.upper()
    if debit_currency != credit.currency.upper():
        raise InstructionRuleError(StatusCode.CURRENCY_MISMATCH, messages.CURRENCY_MISMATCH)
    if debit_currency != instruction_currency:
        raise InstructionRuleError(StatusCode.CURRENCY_MISMATCH, messages.CURRENCY_MISMATCH)


def should_execute_now(execute_by: Optional[str], today: date) -> bool:
    """Decide between immediate and deferred execution.

    Only a date strictly after ``today`` defers the transfer. Dates are
    compared as ISO strings so out-of-calendar days still order correctly.
    """

    if not execute_by:
        return True
    if not is_valid_date_format(execute_by):
        raise InstructionRuleError(StatusCode.INVALID_DATE, messages.INVALID_DATE)
    return execute_by <= today.isoformat()


def ensure_sufficient_funds(debit: Account, amount: int) -> None:
    if debit.balance < amount:
        raise InstructionRuleError(StatusCode.INSUFFICIENT_FUNDS, messages.INSUFFICIENT_FUNDS)
