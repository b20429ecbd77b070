"""Domain models for the caller's account selection."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fints_statement.core.config import get_config
from fints_statement.core.exceptions import InvalidInput


def _default_country_code() -> str:
    return get_config().protocol.default_country_code


class BankIdentifier(BaseModel):
    """Country code plus national bank code identifying one institution."""

    model_config = ConfigDict(frozen=True)

    country_code: str = Field(default_factory=_default_country_code, description="ISO 3166-1 numeric country code")
    bank_code: Optional[str] = Field(None, max_length=30, description="National bank code (BLZ)")


class AccountRef(BaseModel):
    """Identifies one bank account. Supplied by the caller and never modified."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "account_number": "1234567890",
                "bank_code": "12030000",
                "iban": "DE02120300000000202051",
                "bic": "BYLADEM1001"
            }
        }
    )

    account_number: str = Field(..., description="National account number")
    bank_code: str = Field(..., description="National bank code (BLZ)")
    sub_account: Optional[str] = Field(None, description="Sub-account feature (Unterkontomerkmal)")
    iban: Optional[str] = Field(None, description="International bank account number")
    bic: Optional[str] = Field(None, description="Bank identifier code")
    country_code: str = Field(default_factory=_default_country_code, description="ISO 3166-1 numeric country code")

    @property
    def bank(self) -> BankIdentifier:
        return BankIdentifier(country_code=self.country_code, bank_code=self.bank_code)


class DateRange(BaseModel):
    """Optional inclusive date bounds. Both ends present implies from_date <= to_date."""

    model_config = ConfigDict(frozen=True)

    from_date: Optional[date] = Field(None, description="First day included")
    to_date: Optional[date] = Field(None, description="Last day included")

    @model_validator(mode="after")
    def _check_order(self):
        # InvalidInput is not a ValueError, so pydantic lets it through unwrapped
        if self.from_date is not None and self.to_date is not None and self.from_date > self.to_date:
            raise InvalidInput("From-date must be before to-date", field="from_date", value=self.from_date)
        return self

    @property
    def is_open(self) -> bool:
        return self.from_date is None and self.to_date is None


class OperationRequest(BaseModel):
    """Everything the caller asks for. Read-only after construction."""

    model_config = ConfigDict(frozen=True)

    account: AccountRef
    range: DateRange = Field(default_factory=DateRange)
    include_all_accounts: bool = Field(
        False,
        description="Return statements for all accounts of the user (account still required)"
    )
