"""Dependency helpers for API layer."""

from payment_processor.services.instruction_service import PaymentInstructionService


def get_instruction_service() -> PaymentInstructionService:
    """Build payment instruction service dependency."""

    return PaymentInstructionService()
