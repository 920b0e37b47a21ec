"""Balance calculation engine - core business logic for account balances"""

import decimal
from decimal import Decimal
from typing import Iterable

from balance_gateway.config import settings
from balance_gateway.domain.exceptions import BalanceComputationError
from balance_gateway.domain.models import (
    AccountStatus,
    BalanceRequest,
    BalanceResult,
    Transaction,
    TransactionKind,
)
from balance_gateway.utils.decimal_utils import Number, to_decimal


def apply_transactions(
    initial_balance: Number,
    transactions: Iterable[Transaction],
    precision: int | None = None,
) -> Decimal:
    """
    Apply transactions to a starting balance in the order given.

    Requirements:
    - Exact base-10 accumulation (no binary floating point)
    - Credits add, debits subtract
    - No clamping: debits may take the balance below zero

    Raises:
        BalanceComputationError: On decimal overflow or invalid operands
    """
    with decimal.localcontext() as ctx:
        ctx.prec = precision or settings.decimal_precision
        ctx.traps[decimal.Overflow] = True
        ctx.traps[decimal.InvalidOperation] = True

        try:
            balance = to_decimal(initial_balance)
            for txn in transactions:
                amount = to_decimal(txn.amount)
                if txn.kind is TransactionKind.CREDIT:
                    balance += amount
                elif txn.kind is TransactionKind.DEBIT:
                    balance -= amount
                else:
                    raise BalanceComputationError(f"Unknown transaction kind: {txn.kind!r}")
        except decimal.Overflow as e:
            raise BalanceComputationError("Balance exceeds the supported decimal range") from e
        except decimal.InvalidOperation as e:
            raise BalanceComputationError("Balance computation failed: invalid decimal operation") from e
        except (ArithmeticError, ValueError) as e:
            raise BalanceComputationError(f"Balance computation failed: {e}") from e

    return balance


def classify_balance(balance: Decimal) -> AccountStatus:
    """Overdraft strictly below zero; a zero balance is normal"""
    if balance < 0:
        return AccountStatus.OVERDRAFT
    return AccountStatus.NORMAL


def calculate_balance(request: BalanceRequest) -> BalanceResult:
    """
    Main entry point: compute the final balance and account status.

    Returns complete BalanceResult with the exact decimal balance.
    """
    final_balance = apply_transactions(request.initial_balance, request.transactions)

    return BalanceResult(
        final_balance=final_balance,
        status=classify_balance(final_balance),
    )
