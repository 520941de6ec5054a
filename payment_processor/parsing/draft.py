"""Intermediate parse result shared by the grammar and the validators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from payment_processor.constants import InstructionType


@dataclass
class ParsedInstruction:
    """Draft transfer request; amount and currency are refined during validation."""

    type: InstructionType
    amount: Union[str, int] = ""
    currency: str = ""
    debit_account: str = ""
    credit_account: str = ""
    execute_by: Optional[str] = None

    def is_complete(self) -> bool:
        """True when every required token was captured."""

        return all(
            str(value)
            for value in (self.amount, self.currency, self.debit_account, self.credit_account)
        )
