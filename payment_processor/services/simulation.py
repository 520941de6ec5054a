"""Balance simulation for a validated transfer."""

from __future__ import annotations

from typing import Sequence

from payment_processor.schemas.instruction import Account, AccountView


def simulate_balances(
    accounts: Sequence[Account],
    debit: Account,
    credit: Account,
    amount: int,
    execute_now: bool,
) -> list[AccountView]:
    """Project post-transfer balances for the two affected accounts.

    Deferred transfers leave balances untouched. Views keep the relative order
    the accounts had in ``accounts``.
    """

    delta = amount if execute_now else 0
    projected = {
        debit.id: AccountView(
            id=debit.id,
            balance=debit.balance - delta,
            balance_before=debit.balance,
            currency=debit.currency.upper(),
        ),
        credit.id: AccountView(
            id=credit.id,
            balance=credit.balance + delta,
            balance_before=credit.balance,
            currency=credit.currency.upper(),
        ),
    }

    ordered: list[AccountView] = []
    for account in accounts:
        view = projected.pop(account.id, None)
        if view is not None:
            ordered.append(view)
    return ordered
