from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TransactionRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    hash: str = Field(default="", alias="txHash", description="Transaction hash")
    from_address: str = Field(default="", alias="from", description="Sender address")
    to_address: Optional[str] = Field(default="", alias="to", description="Recipient address")
    value: Optional[float] = Field(default=None, description="Native value as reported upstream")
    value_quote: Optional[float] = Field(default=None, alias="valueQuote", description="Value in USD")
    gas_spent: Optional[float] = Field(default=None, alias="gasSpent", description="Gas units used")
    gas_quote: Optional[float] = Field(default=None, alias="gasQuote", description="Gas cost in USD")
    timestamp: Optional[str] = Field(default="", description="ISO-8601 block timestamp")
    successful: bool = Field(default=True, description="Whether the transaction succeeded")
