"""
Wire-format variants of the statement request.

Each protocol version carries a different account encoding:

    V4      SimpleAccount          account number + bank identifier
    V5, V6  ExtendedAccount        account number + sub-account + bank identifier
    V7      InternationalAccount   IBAN + BIC (+ national identifiers)

``StatementRequest`` is a union discriminated by the literal ``version`` tag,
so exactly one variant exists per built request.
"""

from datetime import date
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .account import AccountRef, BankIdentifier


class SimpleAccount(BaseModel):
    """Account number and bank identifier (Kto)."""

    model_config = ConfigDict(frozen=True)

    account_number: str
    bank: BankIdentifier

    @classmethod
    def from_account(cls, account: AccountRef) -> "SimpleAccount":
        return cls(account_number=account.account_number, bank=account.bank)


class ExtendedAccount(BaseModel):
    """Account number, sub-account feature and bank identifier (KtvV3)."""

    model_config = ConfigDict(frozen=True)

    account_number: str
    sub_account: Optional[str] = None
    bank: BankIdentifier

    @classmethod
    def from_account(cls, account: AccountRef) -> "ExtendedAccount":
        return cls(
            account_number=account.account_number,
            sub_account=account.sub_account,
            bank=account.bank
        )


class InternationalAccount(BaseModel):
    """International account identifier (Kti)."""

    model_config = ConfigDict(frozen=True)

    iban: Optional[str] = None
    bic: Optional[str] = None
    account_number: Optional[str] = None
    sub_account: Optional[str] = None
    bank: Optional[BankIdentifier] = None

    @classmethod
    def from_account(cls, account: AccountRef) -> "InternationalAccount":
        if account.iban:
            return cls(iban=account.iban, bic=account.bic)
        # Without an IBAN the national identifiers are sent instead
        return cls(
            account_number=account.account_number,
            sub_account=account.sub_account,
            bank=account.bank
        )


class _StatementRequestBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    from_date: Optional[date] = None
    to_date: Optional[date] = None


class StatementRequestV4(_StatementRequestBase):
    version: Literal[4] = 4
    account: SimpleAccount


class StatementRequestV5(_StatementRequestBase):
    version: Literal[5] = 5
    account: ExtendedAccount
    all_accounts: bool = False


class StatementRequestV6(_StatementRequestBase):
    version: Literal[6] = 6
    account: ExtendedAccount
    all_accounts: bool = False


class StatementRequestV7(_StatementRequestBase):
    version: Literal[7] = 7
    account: InternationalAccount
    all_accounts: bool = False


StatementRequest = Annotated[
    Union[StatementRequestV4, StatementRequestV5, StatementRequestV6, StatementRequestV7],
    Field(discriminator="version"),
]
