"""Assembly of instruction outcomes."""

from __future__ import annotations

from typing import Sequence

from payment_processor import messages
from payment_processor.constants import StatusCode, TransferStatus
from payment_processor.parsing.draft import ParsedInstruction
from payment_processor.schemas.instruction import Account, AccountView, Outcome, Rejection


def build_malformed_outcome() -> Outcome:
    """Outcome for text that matches neither dialect."""

    return Outcome(
        status=TransferStatus.FAILED,
        status_reason=messages.MALFORMED_INSTRUCTION,
        status_code=StatusCode.MALFORMED,
        accounts=[],
    )


def build_transfer_outcome(
    draft: ParsedInstruction,
    accounts: list[AccountView],
    execute_now: bool,
) -> Outcome:
    """Outcome for an instruction that passed every rule."""

    code = StatusCode.SUCCESS if execute_now else StatusCode.PENDING
    return Outcome(
        type=draft.type,
        amount=draft.amount,
        currency=draft.currency,
        debit_account=draft.debit_account,
        credit_account=draft.credit_account,
        execute_by=draft.execute_by,
        status=TransferStatus.SUCCESSFUL if execute_now else TransferStatus.PENDING,
        status_reason=messages.message_for(code),
        status_code=code,
        accounts=accounts,
    )


def build_rejected_outcome(rejection: Rejection, accounts: Sequence[Account]) -> Outcome:
    """Failed outcome echoing the supplied accounts unchanged."""

    return Outcome(
        status=TransferStatus.FAILED,
        status_reason=rejection.message,
        status_code=rejection.status_code,
        accounts=[
            AccountView(
                id=account.id,
                balance=account.balance,
                balance_before=account.balance,
                currency=account.currency.upper(),
            )
            for account in accounts
        ],
    )
