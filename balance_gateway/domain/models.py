"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Tuple


class TransactionKind(str, Enum):
    """Direction of a transaction relative to the account"""

    CREDIT = "credit"
    DEBIT = "debit"


class AccountStatus(str, Enum):
    """Account standing after all transactions are applied"""

    NORMAL = "normal"
    OVERDRAFT = "overdraft"


@dataclass(frozen=True)
class Transaction:
    """Single credit or debit received in a balance request"""

    kind: TransactionKind
    amount: Decimal


@dataclass(frozen=True)
class BalanceRequest:
    """Validated input for a balance calculation"""

    initial_balance: Decimal
    transactions: Tuple[Transaction, ...]


@dataclass(frozen=True)
class BalanceResult:
    """Output of a balance calculation"""

    final_balance: Decimal
    status: AccountStatus
