# Billing Feature - Models

from typing import Optional, List, Literal, Any, Dict
from datetime import datetime
from beanie import Document, Indexed, PydanticObjectId
from pydantic import BaseModel, Field
from visapilot.shared.models import TimestampMixin


InvoiceStatus = Literal["draft", "issued", "paid", "cancelled"]
ItemType = Literal["service", "fee", "consultation", "processing", "other"]
PaymentStatus = Literal["pending", "paid", "refunded"]


class InvoiceItem(BaseModel):
    """A single invoice line."""
    description: str
    quantity: float = Field(..., ge=0)
    unit_price: float = Field(..., ge=0)
    amount: float = Field(0, ge=0)
    item_type: ItemType = "service"


class Invoice(Document, TimestampMixin):
    """Invoice issued to a client."""
    
    # Sequential number (e.g., INV-0001)
    invoice_number: Indexed(str, unique=True)
    
    visa_application_id: Optional[str] = None
    client_ref: Optional[PydanticObjectId] = None
    client_name: str
    client_email: str
    
    items: List[InvoiceItem] = Field(default_factory=list)
    subtotal: float = 0
    tax_rate: float = 0
    tax_amount: float = 0
    total_amount: float = 0
    deposit_amount: float = 0
    due_amount: float = 0
    currency: str = "USD"
    
    due_date: Optional[datetime] = None
    issued_date: Optional[datetime] = None
    paid_date: Optional[datetime] = None
    cancelled_date: Optional[datetime] = None
    status: InvoiceStatus = "draft"
    notes: Optional[str] = None
    created_by: str
    
    def recalculate(self):
        """Recompute line amounts and totals from items, tax and deposit."""
        subtotal = 0.0
        for item in self.items:
            item.amount = round(item.quantity * item.unit_price, 2)
            subtotal += item.amount
        self.subtotal = round(subtotal, 2)
        self.tax_amount = round(self.subtotal * self.tax_rate / 100, 2)
        self.total_amount = round(self.subtotal + self.tax_amount, 2)
        self.due_amount = round(max(0.0, self.total_amount - self.deposit_amount), 2)
    
    def stamp_status(self):
        """Record when the invoice first reached its current status."""
        now = datetime.utcnow()
        if self.status == "issued" and not self.issued_date:
            self.issued_date = now
        elif self.status == "paid" and not self.paid_date:
            self.paid_date = now
        elif self.status == "cancelled" and not self.cancelled_date:
            self.cancelled_date = now
    
    class Settings:
        name = "invoices"
        use_state_management = True


class Payment(Document, TimestampMixin):
    """Payment received against a visa application."""
    
    application_id: str
    amount: float = 0
    commission: float = 0
    agent: str = "Unassigned"
    status: PaymentStatus = "pending"
    
    class Settings:
        name = "payments"
        use_state_management = True


class FeeStructure(Document, TimestampMixin):
    """Published government and service fees for a visa product."""
    
    name: str
    government_fee: float
    service_fee: float
    currency: str = "USD"
    description: str = ""
    is_active: bool = True
    metadata: Dict[str, Any] = Field(default_factory=dict)
    
    class Settings:
        name = "fee_structures"
        use_state_management = True
