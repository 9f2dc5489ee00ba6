"""Result objects returned from a sale."""

from pydantic import BaseModel, ConfigDict, Field

from gatewaysim.gateway.transaction import Transaction
from gatewaysim.gateway.validation import Errors


class SuccessResult(BaseModel):
    """Authorized sale. Errors are always empty."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    transaction: Transaction
    errors: Errors = Field(default_factory=Errors)

    @property
    def is_success(self) -> bool:
        return True


class ErrorResult(BaseModel):
    """Rejected sale.

    Validation failures carry errors and no transaction. A processor decline
    carries an empty error list and the declined transaction.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    errors: Errors
    transaction: Transaction | None = None

    @property
    def is_success(self) -> bool:
        return False
