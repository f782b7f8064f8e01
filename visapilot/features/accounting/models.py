# Accounting Feature - Models

from typing import Optional, Literal
from datetime import datetime
from beanie import Document, Indexed, PydanticObjectId
from pydantic import Field
from visapilot.shared.models import TimestampMixin


TransactionType = Literal["revenue", "expense"]
CommissionStatus = Literal["pending", "paid"]


class Transaction(Document, TimestampMixin):
    """A revenue or expense entry in the ledger."""
    
    description: str
    client_ref: Optional[PydanticObjectId] = None
    client_name: str = "Unknown Client"
    amount: float
    type: Indexed(str)
    category: Indexed(str)
    # Calendar date kept as YYYY-MM-DD text
    date: Indexed(str)
    application_id: Optional[str] = None
    user_id: Optional[str] = None
    notes: str = ""
    
    class Settings:
        name = "transactions"
        use_state_management = True


class Commission(Document, TimestampMixin):
    """Commission owed to an agent for a period."""
    
    agent_id: str
    agent_name: str
    period: str  # e.g. "January 2024"
    transactions_count: int = Field(0, ge=0)
    total_amount: float = Field(0, ge=0)
    commission_rate: float = Field(..., ge=0, le=100)
    commission_earned: float = Field(0, ge=0)
    status: CommissionStatus = "pending"
    payment_date: Optional[datetime] = None
    notes: str = ""
    
    class Settings:
        name = "commissions"
        use_state_management = True
