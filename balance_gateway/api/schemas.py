"""Pydantic schemas for API request/response validation"""

from decimal import Decimal
from typing import Annotated, Any, List, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from balance_gateway.domain.models import (
    AccountStatus,
    BalanceRequest,
    BalanceResult,
    Transaction,
    TransactionKind,
)
from balance_gateway.domain.balance import classify_balance
from balance_gateway.utils.decimal_utils import check_numeric_string, to_float

# Wire encoding of AccountStatus
STATUS_CODES = {
    AccountStatus.NORMAL: 1,
    AccountStatus.OVERDRAFT: 2,
}
STATUS_BY_CODE = {code: status for status, code in STATUS_CODES.items()}

# Numbers, or strings holding a plain decimal numeral
NumericDecimal = Annotated[Decimal, BeforeValidator(check_numeric_string)]


class TransactionSchema(BaseModel):
    """Single transaction in a balance request"""

    model_config = ConfigDict(populate_by_name=True)

    kind: TransactionKind = Field(
        ...,
        alias="type",
        description="Transaction type - credit adds to balance, debit subtracts",
        examples=["credit"],
    )
    amount: NumericDecimal = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Transaction amount (must be non-negative)",
        examples=[200],
    )


class CalculateBalanceRequest(BaseModel):
    """Request body for POST /calculate-balance"""

    model_config = ConfigDict(populate_by_name=True)

    initial_balance: NumericDecimal = Field(
        ...,
        alias="initialBalance",
        allow_inf_nan=False,
        description="The initial account balance",
        examples=[5000],
    )
    transactions: List[TransactionSchema] = Field(
        ...,
        min_length=1,
        description="Transactions to process, applied in order",
    )

    def to_domain(self) -> BalanceRequest:
        return BalanceRequest(
            initial_balance=self.initial_balance,
            transactions=tuple(
                Transaction(kind=txn.kind, amount=txn.amount) for txn in self.transactions
            ),
        )


class CalculateBalanceResponse(BaseModel):
    """Response for POST /calculate-balance"""

    model_config = ConfigDict(populate_by_name=True)

    final_balance: float = Field(
        ...,
        alias="finalBalance",
        description="The calculated final balance",
        examples=[4250],
    )
    status: Literal[1, 2] = Field(
        ...,
        description="Account status - 1 for normal (balance >= 0), 2 for overdraft (balance < 0)",
        examples=[1],
    )

    @classmethod
    def from_result(cls, result: BalanceResult) -> "CalculateBalanceResponse":
        final_balance = to_float(result.final_balance)
        # Status follows the emitted value: a balance that rounds to 0.0 is normal
        status = classify_balance(Decimal(final_balance))
        return cls(final_balance=final_balance, status=STATUS_CODES[status])

    @property
    def account_status(self) -> AccountStatus:
        return STATUS_BY_CODE[self.status]


class ValidationDetail(BaseModel):
    """Single field-level validation failure"""

    location: str = "body"
    path: str
    msg: str
    value: Optional[Any] = None


class ValidationErrorResponse(BaseModel):
    """Response body for 400 validation failures"""

    error: str = "Validation failed"
    details: List[ValidationDetail]


class InternalErrorResponse(BaseModel):
    """Response body for 500 internal failures"""

    error: str = "Internal server error"
    message: str


class HealthResponse(BaseModel):
    """Response for GET /health"""

    status: str = "ok"
