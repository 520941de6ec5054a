"""Payment instruction request and outcome schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from payment_processor.constants import InstructionType, StatusCode, TransferStatus


class Account(BaseModel):
    """Caller-supplied account snapshot."""

    model_config = ConfigDict(frozen=True)

    id: str
    balance: int
    currency: str


class PaymentInstructionRequest(BaseModel):
    """Envelope accepted by the payment instruction endpoint."""

    accounts: list[Account]
    instruction: str


class AccountView(BaseModel):
    """Account balance before and after the simulated transfer."""

    id: str
    balance: int
    balance_before: int
    currency: str


class Outcome(BaseModel):
    """Structured result of one instruction evaluation."""

    type: Optional[InstructionType] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    debit_account: Optional[str] = None
    credit_account: Optional[str] = None
    execute_by: Optional[str] = None
    status: TransferStatus
    status_reason: str
    status_code: StatusCode
    accounts: list[AccountView] = Field(default_factory=list)


class Rejection(BaseModel):
    """Business-rule failure for a structurally valid instruction."""

    model_config = ConfigDict(frozen=True)

    status_code: StatusCode
    message: str


class StatusCodeRead(BaseModel):
    """One row of the published status code table."""

    code: str
    name: str
    message: str
