from typing import Optional

from pydantic import BaseModel, Field

from app.models.trip import Amount


class ParsedExpense(BaseModel):
    """Best-effort guess from the language model; untrusted."""
    description: str = ""
    amount: Amount = 0
    payer_name: Optional[str] = Field(None, alias="payerName")

    model_config = {"populate_by_name": True}
