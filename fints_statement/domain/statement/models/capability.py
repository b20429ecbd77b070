"""Domain model for what the bank advertises about the statement operation."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

STATEMENT_OPERATION = "HKKAZ"
STATEMENT_PARAMETERS = "HIKAZS"


class CapabilitySet(BaseModel):
    """
    Bank parameter data for one operation kind.

    Owned by the bank parameter store; the client only reads it.
    """

    model_config = ConfigDict(frozen=True)

    operation: str = Field(STATEMENT_OPERATION, description="Operation kind the parameters belong to")
    advertised_versions: List[int] = Field(
        default_factory=list,
        description="Parameter versions the bank advertises for this operation"
    )
    all_accounts_permitted: bool = Field(
        False,
        description="Whether a single request may ask for all accounts of the user"
    )
