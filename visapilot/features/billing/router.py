# Billing Feature - Router

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from visapilot.config import settings
from visapilot.database import Database, get_database
from visapilot.features.auth.dependencies import get_current_user
from visapilot.features.auth.models import User
from visapilot.features.billing.models import InvoiceStatus, PaymentStatus
from visapilot.features.billing.schemas import (
    CreateInvoiceRequest,
    FeeStructureListResponse,
    FeeStructureRequest,
    FeeStructureResponse,
    InvoiceListResponse,
    InvoiceResponse,
    PaymentListResponse,
    PaymentRequest,
    PaymentResponse,
    UpdateFeeStructureRequest,
    UpdateInvoiceRequest,
    UpdatePaymentRequest,
)
from visapilot.features.billing.service import FeeStructureService, InvoiceService, PaymentService
from visapilot.shared.schemas import MessageResponse, page_fields


invoices_router = APIRouter(prefix="/billing/invoices", tags=["Billing"])
payments_router = APIRouter(prefix="/payment-billing", tags=["Payments"])


# ============== Invoices ==============

@invoices_router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    search: Optional[str] = None,
    invoice_status: Optional[InvoiceStatus] = Query(None, alias="status"),
    client_id: Optional[str] = Query(None, alias="clientId"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
    current_user: User = Depends(get_current_user)
):
    """
    List invoices, newest first.
    
    - **search**: Match on invoice number, client name or email
    - **status**: draft | issued | paid | cancelled
    - **clientId**: Only invoices for this client
    """
    limit = settings.clamp_limit(limit)
    invoices, total = await InvoiceService.list_invoices(
        search, invoice_status, client_id, (page - 1) * limit, limit
    )
    
    return InvoiceListResponse(
        invoices=[InvoiceService.invoice_to_response(i) for i in invoices],
        **page_fields(total, page, limit),
    )


@invoices_router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
async def create_invoice(
    request: CreateInvoiceRequest,
    db: Database = Depends(get_database),
    current_user: User = Depends(get_current_user)
):
    """Create an invoice. Line amounts and totals are computed server-side."""
    invoice = await InvoiceService.create_invoice(db, request, current_user)
    return InvoiceService.invoice_to_response(invoice)


@invoices_router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(
    invoice_id: str,
    current_user: User = Depends(get_current_user)
):
    invoice = await InvoiceService.get_invoice(invoice_id)
    return InvoiceService.invoice_to_response(invoice)


@invoices_router.put("/{invoice_id}", response_model=InvoiceResponse)
async def update_invoice(
    invoice_id: str,
    request: UpdateInvoiceRequest,
    current_user: User = Depends(get_current_user)
):
    """Update an invoice; totals are recomputed and status dates stamped."""
    invoice = await InvoiceService.update_invoice(invoice_id, request)
    return InvoiceService.invoice_to_response(invoice)


@invoices_router.delete("/{invoice_id}", response_model=MessageResponse)
async def delete_invoice(
    invoice_id: str,
    current_user: User = Depends(get_current_user)
):
    await InvoiceService.delete_invoice(invoice_id)
    return MessageResponse(message="Invoice deleted successfully")


# ============== Payments ==============

@payments_router.get("/payments", response_model=PaymentListResponse)
async def list_payments(
    search: Optional[str] = None,
    payment_status: Optional[PaymentStatus] = Query(None, alias="status"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
    current_user: User = Depends(get_current_user)
):
    """List payments, newest first."""
    limit = settings.clamp_limit(limit)
    payments, total = await PaymentService.list_payments(
        search, payment_status, (page - 1) * limit, limit
    )
    
    return PaymentListResponse(
        payments=[PaymentService.payment_to_response(p) for p in payments],
        **page_fields(total, page, limit),
    )


@payments_router.post("/payments", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(
    request: PaymentRequest,
    current_user: User = Depends(get_current_user)
):
    payment = await PaymentService.create_payment(request)
    return PaymentService.payment_to_response(payment)


@payments_router.get("/payments/{payment_id}", response_model=PaymentResponse)
async def get_payment(
    payment_id: str,
    current_user: User = Depends(get_current_user)
):
    payment = await PaymentService.get_payment(payment_id)
    return PaymentService.payment_to_response(payment)


@payments_router.put("/payments/{payment_id}", response_model=PaymentResponse)
async def update_payment(
    payment_id: str,
    request: UpdatePaymentRequest,
    current_user: User = Depends(get_current_user)
):
    payment = await PaymentService.update_payment(payment_id, request)
    return PaymentService.payment_to_response(payment)


@payments_router.delete("/payments/{payment_id}", response_model=MessageResponse)
async def delete_payment(
    payment_id: str,
    current_user: User = Depends(get_current_user)
):
    await PaymentService.delete_payment(payment_id)
    return MessageResponse(message="Payment deleted successfully")


# ============== Fee Structures ==============

@payments_router.get("/fee-structures", response_model=FeeStructureListResponse)
async def list_fee_structures(
    search: Optional[str] = None,
    active_only: bool = Query(False, alias="activeOnly"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
    current_user: User = Depends(get_current_user)
):
    """
    List fee structures by name.
    
    - **activeOnly**: Hide retired fee structures
    """
    limit = settings.clamp_limit(limit)
    fee_structures, total = await FeeStructureService.list_fee_structures(
        search, active_only, (page - 1) * limit, limit
    )
    
    return FeeStructureListResponse(
        fee_structures=[FeeStructureService.fee_structure_to_response(f) for f in fee_structures],
        **page_fields(total, page, limit),
    )


@payments_router.post("/fee-structures", response_model=FeeStructureResponse, status_code=status.HTTP_201_CREATED)
async def create_fee_structure(
    request: FeeStructureRequest,
    current_user: User = Depends(get_current_user)
):
    fee_structure = await FeeStructureService.create_fee_structure(request)
    return FeeStructureService.fee_structure_to_response(fee_structure)


@payments_router.get("/fee-structures/{fee_structure_id}", response_model=FeeStructureResponse)
async def get_fee_structure(
    fee_structure_id: str,
    current_user: User = Depends(get_current_user)
):
    fee_structure = await FeeStructureService.get_fee_structure(fee_structure_id)
    return FeeStructureService.fee_structure_to_response(fee_structure)


@payments_router.put("/fee-structures/{fee_structure_id}", response_model=FeeStructureResponse)
async def update_fee_structure(
    fee_structure_id: str,
    request: UpdateFeeStructureRequest,
    current_user: User = Depends(get_current_user)
):
    fee_structure = await FeeStructureService.update_fee_structure(fee_structure_id, request)
    return FeeStructureService.fee_structure_to_response(fee_structure)


@payments_router.delete("/fee-structures/{fee_structure_id}", response_model=MessageResponse)
async def delete_fee_structure(
    fee_structure_id: str,
    current_user: User = Depends(get_current_user)
):
    await FeeStructureService.delete_fee_structure(fee_structure_id)
    return MessageResponse(message="Fee structure deleted successfully")
