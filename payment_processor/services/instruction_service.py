"""Parse, validate and simulate payment instructions."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Callable, Sequence, Union

from payment_processor.api.errors import InstructionRuleError
from payment_processor.parsing.grammar import parse_instruction
from payment_processor.schemas.instruction import Account, Outcome, Rejection
from payment_processor.services.response_builder import build_malformed_outcome, build_transfer_outcome
from payment_processor.services.simulation import simulate_balances
from payment_processor.validators.business import (
    ensure_matching_currencies,
    ensure_sufficient_funds,
    find_account,
    should_execute_now,
)
from payment_processor.validators.fields import (
    ensure_distinct_accounts,
    ensure_valid_account_id,
    validate_amount,
    validate_currency,
)

logger = logging.getLogger(__name__)

InstructionResult = Union[Outcome, Rejection]


def utc_today() -> date:
    """Current calendar date in UTC."""

    return datetime.now(timezone.utc).date()


class PaymentInstructionService:
    """Run the parse-validate-simulate pipeline for one instruction at a time."""

    def __init__(self, today: Callable[[], date] = utc_today) -> None:
        self._today = today

    def evaluate(self, accounts: Sequence[Account], instruction: str) -> InstructionResult:
        """Return an outcome, or a rejection when a business rule fails."""

        try:
            return self.process(accounts, instruction)
        except InstructionRuleError as exc:
            logger.info("Instruction rejected: %s (%s)", exc.code.value, exc.message)
            return Rejection(status_code=exc.code, message=exc.message)

    def process(self, accounts: Sequence[Account], instruction: str) -> Outcome:
        """Return an outcome; business-rule failures raise ``InstructionRuleError``.

        Rules run in a fixed order and the first violation wins.
        """

        draft = parse_instruction(instruction)
        if draft is None or not draft.is_complete():
            logger.info("Malformed instruction: %r", instruction)
            return build_malformed_outcome()

        amount = validate_amount(str(draft.amount))
        draft.amount = amount
        draft.currency = validate_currency(draft.currency)
        ensure_valid_account_id(draft.debit_account)
        ensure_valid_account_id(draft.credit_account)
        ensure_distinct_accounts(draft.debit_account, draft.credit_account)

        debit = find_account(accounts, draft.debit_account)
        credit = find_account(accounts, draft.credit_account)
        ensure_matching_currencies(debit, credit, draft.currency)

        execute_now = should_execute_now(draft.execute_by, self._today())
        if execute_now:
            ensure_sufficient_funds(debit, amount)

        views = simulate_balances(accounts, debit, credit, amount, execute_now)
        outcome = build_transfer_outcome(draft, views, execute_now)
        logger.info(
            "Instruction %s %s -> %s: %s",
            draft.type.value,
            draft.debit_account,
            draft.credit_account,
            outcome.status.value,
        )
        return outcome
