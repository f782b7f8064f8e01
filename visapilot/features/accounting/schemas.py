# Accounting Feature - Schemas

from typing import Optional, List
from datetime import date as CalendarDate, datetime
from pydantic import Field, field_validator

from visapilot.features.accounting.models import CommissionStatus, TransactionType
from visapilot.shared.schemas import CamelModel, PageInfo


# ============== Transactions ==============

class TransactionRequest(CamelModel):
    description: str = Field(..., min_length=1)
    client_id: Optional[str] = None
    client_name: Optional[str] = None
    amount: float = Field(..., ge=0)
    type: TransactionType
    category: str = Field(..., min_length=1)
    date: CalendarDate
    application_id: Optional[str] = None
    notes: str = ""


class TransactionResponse(CamelModel):
    id: str
    description: str
    client_id: Optional[str] = None
    client_name: str
    amount: float
    type: str
    category: str
    date: str
    application_id: Optional[str] = None
    user_id: Optional[str] = None
    notes: str
    created_at: datetime
    updated_at: datetime


class TransactionListResponse(PageInfo):
    transactions: List[TransactionResponse]


# ============== Commissions ==============

class CommissionRequest(CamelModel):
    agent_id: str = Field(..., min_length=1)
    agent_name: str = Field(..., min_length=1)
    period: str = Field(..., min_length=1)
    transactions_count: int = Field(0, ge=0)
    total_amount: float = Field(0, ge=0)
    commission_rate: float
    commission_earned: Optional[float] = Field(None, ge=0)
    status: CommissionStatus = "pending"
    payment_date: Optional[datetime] = None
    notes: str = ""
    
    @field_validator("agent_id", "agent_name", "period")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class CommissionResponse(CamelModel):
    id: str
    agent_id: str
    agent_name: str
    period: str
    transactions_count: int
    total_amount: float
    commission_rate: float
    commission_earned: float
    status: str
    payment_date: Optional[datetime] = None
    notes: str
    created_at: datetime
    updated_at: datetime


# ============== Summary ==============

class AccountingSummaryResponse(CamelModel):
    total_revenue: float
    total_expenses: float
    net_profit: float
    profit_margin: float
    total_commission_earned: float
    transactions: List[TransactionResponse]
