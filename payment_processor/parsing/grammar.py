"""Keyword grammar for the two supported payment instruction dialects.

Each dialect is a fixed sequence of steps run left to right over the raw
instruction text:

* ``Keyword`` finds a keyword (case-insensitive) and moves past it.
* ``Capture`` takes the next whitespace-delimited token into a named field.
* ``OptionalClause`` runs its inner steps and keeps their result only when
  all of them succeed.

Every step starts searching right after the region the previous step matched.
A missing required keyword means "no match" for that dialect, never an error.
Token content is not interpreted here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Protocol, Union

from payment_processor.constants import InstructionType
from payment_processor.parsing.draft import ParsedInstruction
from payment_processor.parsing.scanner import extract_word, find_keyword, skip_whitespace

logger = logging.getLogger(__name__)


@dataclass
class MatchState:
    """Cursor over the instruction text plus the tokens captured so far."""

    text: str
    position: int = 0
    fields: dict[str, str] = field(default_factory=dict)

    def fork(self) -> "MatchState":
        return replace(self, fields=dict(self.fields))


class Step(Protocol):
    def advance(self, state: MatchState) -> bool:
        ...


@dataclass(frozen=True)
class Keyword:
    """Required keyword; fails the dialect when absent."""

    word: str

    def advance(self, state: MatchState) -> bool:
        index = find_keyword(state.text, self.word, state.position)
        if index is None:
            return False
        state.position = index + len(self.word)
        return True


@dataclass(frozen=True)
class Capture:
    """Store the next token under ``name``; an empty token is recorded as-is."""

    name: str
    upper: bool = False

    def advance(self, state: MatchState) -> bool:
        start = skip_whitespace(state.text, state.position)
        token = extract_word(state.text, start)
        state.fields[self.name] = token.upper() if self.upper else token
        state.position = start + len(token)
        return True


@dataclass(frozen=True)
class OptionalClause:
    """Trailing clause that may be absent without failing the dialect."""

    steps: tuple[Union[Keyword, Capture], ...]

    def advance(self, state: MatchState) -> bool:
        trial = state.fork()
        if all(step.advance(trial) for step in self.steps):
            state.position = trial.position
            state.fields.update(trial.fields)
        return True


@dataclass(frozen=True)
class Dialect:
    """One instruction grammar: a name plus its ordered steps."""

    type: InstructionType
    steps: tuple[Step, ...]

    def match(self, text: str) -> Optional[ParsedInstruction]:
        """Run all steps over ``text``; ``None`` when a required keyword is missing."""

        state = MatchState(text=text)
        for step in self.steps:
            if not step.advance(state):
                return None

        return ParsedInstruction(
            type=self.type,
            amount=state.fields.get("amount", ""),
            currency=state.fields.get("currency", ""),
            debit_account=state.fields.get("debit_account", ""),
            credit_account=state.fields.get("credit_account", ""),
            execute_by=state.fields.get("execute_by") or None,
        )


SCHEDULE_CLAUSE = OptionalClause(steps=(Keyword("ON"), Capture("execute_by")))

DEBIT_DIALECT = Dialect(
    type=InstructionType.DEBIT,
    steps=(
        Keyword("DEBIT"),
        Capture("amount"),
        Capture("currency", upper=True),
        Keyword("FROM"),
        Keyword("ACCOUNT"),
        Capture("debit_account"),
        Keyword("FOR"),
        Keyword("CREDIT"),
        Keyword("TO"),
        Keyword("ACCOUNT"),
        Capture("credit_account"),
        SCHEDULE_CLAUSE,
    ),
)

CREDIT_DIALECT = Dialect(
    type=InstructionType.CREDIT,
    steps=(
        Keyword("CREDIT"),
        Capture("amount"),
        Capture("currency", upper=True),
        Keyword("TO"),
        Keyword("ACCOUNT"),
        Capture("credit_account"),
        Keyword("FOR"),
        Keyword("DEBIT"),
        Keyword("FROM"),
        Keyword("ACCOUNT"),
        Capture("debit_account"),
        SCHEDULE_CLAUSE,
    ),
)

# Order matters: CREDIT is only tried when DEBIT fails outright.
DIALECTS: tuple[Dialect, ...] = (DEBIT_DIALECT, CREDIT_DIALECT)


def parse_instruction(text: str) -> Optional[ParsedInstruction]:
    """Return the draft of the first dialect matching ``text``."""

    for dialect in DIALECTS:
        draft = dialect.match(text)
        if draft is not None:
            logger.debug("Instruction matched %s dialect", dialect.type.value)
            return draft
    return None
