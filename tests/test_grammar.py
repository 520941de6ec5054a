from __future__ import annotations

import pytest

from payment_processor.constants import InstructionType
from payment_processor.parsing.grammar import (
    CREDIT_DIALECT,
    DEBIT_DIALECT,
    Capture,
    Keyword,
    MatchState,
    OptionalClause,
    parse_instruction,
)


def test_keyword_step_moves_past_match() -> None:
    state = MatchState(text="DEBIT 500 USD")
    assert Keyword("debit").advance(state) is True
    assert state.position == 5


def test_keyword_step_fails_when_absent() -> None:
    state = MatchState(text="DEBIT 500 USD", position=6)
    assert Keyword("DEBIT").advance(state) is False
    assert state.position == 6


def test_capture_step_records_token() -> None:
    state = MatchState(text="DEBIT   500 usd", position=5)
    Capture("amount").advance(state)
    Capture("currency", upper=True).advance(state)
    assert state.fields == {"amount": "500", "currency": "USD"}
    assert state.position == len("DEBIT   500 usd")


def test_optional_clause_skipped_without_keyword() -> None:
    state = MatchState(text="ACCOUNT A2", position=10)
    clause = OptionalClause(steps=(Keyword("ON"), Capture("execute_by")))
    assert clause.advance(state) is True
    assert "execute_by" not in state.fields
    assert state.position == 10


def test_optional_clause_captures_date() -> None:
    state = MatchState(text="A2 ON 2025-01-01", position=2)
    clause = OptionalClause(steps=(Keyword("ON"), Capture("execute_by")))
    clause.advance(state)
    assert state.fields["execute_by"] == "2025-01-01"


def test_debit_dialect_full_instruction() -> None:
    draft = DEBIT_DIALECT.match("DEBIT 500 usd FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT A2 ON 2025-01-01")

    assert draft is not None
    assert draft.type == InstructionType.DEBIT
    assert draft.amount == "500"
    assert draft.currency == "USD"
    assert draft.debit_account == "A1"
    assert draft.credit_account == "A2"
    assert draft.execute_by == "2025-01-01"


def test_credit_dialect_full_instruction() -> None:
    draft = CREDIT_DIALECT.match("CREDIT 500 USD TO ACCOUNT A2 FOR DEBIT FROM ACCOUNT A1")

    assert draft is not None
    assert draft.type == InstructionType.CREDIT
    assert draft.debit_account == "A1"
    assert draft.credit_account == "A2"
    assert draft.execute_by is None


def test_dialects_agree_on_accounts() -> None:
    debit = parse_instruction("DEBIT 100 USD FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT A2")
    credit = parse_instruction("CREDIT 100 USD TO ACCOUNT A2 FOR DEBIT FROM ACCOUNT A1")

    assert debit is not None and credit is not None
    assert (debit.debit_account, debit.credit_account) == (credit.debit_account, credit.credit_account)
    assert debit.type != credit.type


def test_lowercase_instruction_parses_like_uppercase() -> None:
    lower = parse_instruction("debit 100 usd from account A1 for credit to account A2")
    upper = parse_instruction("DEBIT 100 USD FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT A2")

    assert lower == upper


def test_raw_tokens_are_not_interpreted() -> None:
    draft = parse_instruction("DEBIT -5.5 xyz FROM ACCOUNT a!b FOR CREDIT TO ACCOUNT c ON tomorrow")

    assert draft is not None
    assert draft.amount == "-5.5"
    assert draft.currency == "XYZ"
    assert draft.debit_account == "a!b"
    assert draft.execute_by == "tomorrow"


def test_trailing_on_without_date_leaves_schedule_empty() -> None:
    draft = parse_instruction("DEBIT 5 USD FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT A2 ON")

    assert draft is not None
    assert draft.execute_by is None


def test_missing_credit_account_is_incomplete() -> None:
    draft = parse_instruction("DEBIT 5 USD FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT")

    assert draft is not None
    assert draft.type == InstructionType.DEBIT
    assert draft.is_complete() is False


@pytest.mark.parametrize(
    "text",
    [
        "TRANSFER 100 USD",
        "",
        "DEBIT 100 USD TO ACCOUNT A2",
        "CREDIT 100 USD FROM ACCOUNT A1",
        "DEBIT 100 USD FROM ACCOUNT A1 FOR CREDIT ACCOUNT A2",
    ],
)
def test_unmatched_instructions(text: str) -> None:
    assert parse_instruction(text) is None


def test_keyword_inside_captured_token_is_skipped() -> None:
    draft = parse_instruction("DEBIT 5 USD FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT LONDON1")

    assert draft is not None
    assert draft.credit_account == "LONDON1"
    assert draft.execute_by is None
