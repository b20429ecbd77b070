"""Domain models for the assembled statement of account."""

from collections import OrderedDict
from datetime import date
from datetime import date as date_type
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class CreditDebit(str, Enum):
    """Direction of a booking as marked in the statement line."""
    CREDIT = "C"
    DEBIT = "D"
    REVERSAL_CREDIT = "RC"  # Storno of a debit, money in
    REVERSAL_DEBIT = "RD"   # Storno of a credit, money out

    @property
    def sign(self) -> int:
        return 1 if self in (CreditDebit.CREDIT, CreditDebit.REVERSAL_CREDIT) else -1


class CounterParty(BaseModel):
    """The other side of a booking, as far as the bank reports it."""

    model_config = ConfigDict(frozen=True)

    account: str = Field("", description="IBAN or national account number")
    bank: str = Field("", description="BIC or national bank code")
    name: str = Field("", description="Account holder name")


class Booking(BaseModel):
    """One transaction entry of the statement."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "amount": "-42.50",
                "currency": "EUR",
                "value_date": "2023-01-16",
                "booking_date": "2023-01-16",
                "mark": "D",
                "counter_party": {"account": "DE44500105175407324931", "bank": "INGDDEFFXXX", "name": "Max Mustermann"},
                "reference": "NOTPROVIDED",
                "purpose": "Rechnung 4711",
                "balance_after": "957.50"
            }
        }
    )

    amount: Decimal = Field(..., description="Signed amount, negative for money out")
    currency: str = Field(..., description="ISO 4217 currency code")
    value_date: date = Field(..., description="Date the amount takes effect (Valuta)")
    booking_date: date = Field(..., description="Date the bank booked the entry")
    mark: CreditDebit = Field(..., description="Credit/debit mark")
    transaction_type: str = Field("", description="SWIFT transaction type code, e.g. NTRF")
    transaction_code: str = Field("", description="Business transaction code (GVC)")
    booking_text: str = Field("", description="Booking text, e.g. 'SEPA-Ueberweisung'")
    counter_party: CounterParty = Field(default_factory=CounterParty)
    reference: str = Field("", description="Counter-party or end-to-end reference")
    customer_reference: str = Field("", description="Customer reference from the statement line")
    bank_reference: str = Field("", description="Bank reference from the statement line")
    purpose: str = Field("", description="Purpose text (Verwendungszweck)")
    balance_after: Optional[Decimal] = Field(None, description="Balance after this booking, when derivable")


class Balance(BaseModel):
    """A balance reported in the statement text (opening or closing)."""

    model_config = ConfigDict(frozen=True)

    amount: Decimal
    currency: str
    date: date_type


class StatementOfAccount(BaseModel):
    """
    Ordered bookings of one operation.

    Built once by the assembler and immutable afterwards. Order is the
    order of the fragments the bank sent, each fragment's internal order kept.
    """

    model_config = ConfigDict(frozen=True)

    bookings: Tuple[Booking, ...] = Field(default_factory=tuple)
    opening_balance: Optional[Balance] = Field(None, description="First opening balance reported")
    closing_balance: Optional[Balance] = Field(None, description="Last closing balance reported")

    @classmethod
    def empty(cls) -> "StatementOfAccount":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.bookings

    def __len__(self) -> int:
        return len(self.bookings)

    def by_value_date(self) -> Dict[date, List[Booking]]:
        """Group bookings by value date, keeping the statement order."""
        grouped: Dict[date, List[Booking]] = OrderedDict()
        for booking in self.bookings:
            grouped.setdefault(booking.value_date, []).append(booking)
        return grouped
