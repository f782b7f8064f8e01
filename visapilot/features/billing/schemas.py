# Billing Feature - Schemas

from typing import Optional, List, Any, Dict
from datetime import datetime
from pydantic import EmailStr, Field

from visapilot.features.billing.models import InvoiceStatus, ItemType, PaymentStatus
from visapilot.shared.schemas import CamelModel, PageInfo, PartialUpdateModel


# ============== Invoices ==============

class InvoiceItemSchema(CamelModel):
    description: str = Field(..., min_length=1)
    quantity: float = Field(..., ge=0)
    unit_price: float = Field(..., ge=0)
    amount: float = 0
    item_type: ItemType = "service"


class CreateInvoiceRequest(CamelModel):
    """Request schema for creating an invoice; totals are computed."""
    visa_application_id: Optional[str] = None
    client_id: Optional[str] = None
    client_name: str = Field(..., min_length=1)
    client_email: EmailStr
    items: List[InvoiceItemSchema] = Field(default_factory=list)
    tax_rate: float = Field(0, ge=0)
    deposit_amount: float = Field(0, ge=0)
    currency: str = "USD"
    due_date: Optional[datetime] = None
    status: InvoiceStatus = "draft"
    notes: Optional[str] = None


class UpdateInvoiceRequest(PartialUpdateModel):
    """Request schema for updating an invoice."""
    nullable_fields = frozenset({"visa_application_id", "due_date", "notes"})
    
    visa_application_id: Optional[str] = None
    client_name: Optional[str] = Field(None, min_length=1)
    client_email: Optional[EmailStr] = None
    items: Optional[List[InvoiceItemSchema]] = None
    tax_rate: Optional[float] = Field(None, ge=0)
    deposit_amount: Optional[float] = Field(None, ge=0)
    currency: Optional[str] = None
    due_date: Optional[datetime] = None
    status: Optional[InvoiceStatus] = None
    notes: Optional[str] = None


class InvoiceResponse(CamelModel):
    id: str
    invoice_number: str
    visa_application_id: Optional[str] = None
    client_id: Optional[str] = None
    client_name: str
    client_email: str
    items: List[InvoiceItemSchema] = []
    subtotal: float
    tax_rate: float
    tax_amount: float
    total_amount: float
    deposit_amount: float
    due_amount: float
    currency: str
    due_date: Optional[datetime] = None
    issued_date: Optional[datetime] = None
    paid_date: Optional[datetime] = None
    cancelled_date: Optional[datetime] = None
    status: str
    notes: Optional[str] = None
    created_by: str
    created_at: datetime
    updated_at: datetime


class InvoiceListResponse(PageInfo):
    invoices: List[InvoiceResponse]


# ============== Payments ==============

class PaymentRequest(CamelModel):
    application_id: str = Field(..., min_length=1)
    amount: float = Field(0, ge=0)
    commission: float = Field(0, ge=0)
    agent: str = "Unassigned"
    status: PaymentStatus = "pending"


class UpdatePaymentRequest(PartialUpdateModel):
    application_id: Optional[str] = Field(None, min_length=1)
    amount: Optional[float] = Field(None, ge=0)
    commission: Optional[float] = Field(None, ge=0)
    agent: Optional[str] = None
    status: Optional[PaymentStatus] = None


class PaymentResponse(CamelModel):
    id: str
    application_id: str
    amount: float
    commission: float
    agent: str
    status: str
    created_at: datetime
    updated_at: datetime


class PaymentListResponse(PageInfo):
    payments: List[PaymentResponse]


# ============== Fee Structures ==============

class FeeStructureRequest(CamelModel):
    name: str = Field(..., min_length=1)
    government_fee: float = Field(..., ge=0)
    service_fee: float = Field(..., ge=0)
    currency: str = "USD"
    description: str = ""
    is_active: bool = True
    metadata: Dict[str, Any] = Field(default_factory=dict)


class UpdateFeeStructureRequest(PartialUpdateModel):
    name: Optional[str] = Field(None, min_length=1)
    government_fee: Optional[float] = Field(None, ge=0)
    service_fee: Optional[float] = Field(None, ge=0)
    currency: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None
    metadata: Optional[Dict[str, Any]] = None


class FeeStructureResponse(CamelModel):
    id: str
    name: str
    government_fee: float
    service_fee: float
    total_fee: float
    currency: str
    description: str
    is_active: bool
    metadata: Dict[str, Any] = {}
    created_at: datetime
    updated_at: datetime


class FeeStructureListResponse(PageInfo):
    fee_structures: List[FeeStructureResponse]
