"""Payment instruction endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from payment_processor.api.deps import get_instruction_service
from payment_processor.constants import StatusCode, TransferStatus
from payment_processor.messages import message_for
from payment_processor.schemas.instruction import (
    Outcome,
    PaymentInstructionRequest,
    Rejection,
    StatusCodeRead,
)
from payment_processor.services.instruction_service import PaymentInstructionService
from payment_processor.services.response_builder import build_rejected_outcome

router = APIRouter(prefix="/payment-instructions", tags=["payment-instructions"])


@router.post("", response_model=Outcome, responses={400: {"model": Outcome}})
async def process_payment_instruction(
    payload: PaymentInstructionRequest,
    service: PaymentInstructionService = Depends(get_instruction_service),
) -> JSONResponse:
    """Parse an instruction and report the simulated transfer outcome."""

    result = service.evaluate(payload.accounts, payload.instruction)
    if isinstance(result, Rejection):
        result = build_rejected_outcome(result, payload.accounts)

    status_code = 400 if result.status == TransferStatus.FAILED else 200
    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))


@router.get("/status-codes", response_model=list[StatusCodeRead])
async def list_status_codes() -> list[StatusCodeRead]:
    """Return the stable status code table."""

    return [StatusCodeRead(code=code.value, name=code.name, message=message_for(code)) for code in StatusCode]
