# Billing Feature - Service

import re
from typing import List, Optional, Tuple

from beanie.operators import Or, RegEx

from visapilot.core.logging import logger
from visapilot.database import Database
from visapilot.features.auth.models import User
from visapilot.features.billing.models import FeeStructure, Invoice, InvoiceItem, Payment
from visapilot.features.billing.schemas import (
    CreateInvoiceRequest,
    FeeStructureRequest,
    FeeStructureResponse,
    InvoiceResponse,
    PaymentRequest,
    PaymentResponse,
    UpdateFeeStructureRequest,
    UpdateInvoiceRequest,
    UpdatePaymentRequest,
)
from visapilot.features.clients.models import Client
from visapilot.shared.exceptions import NotFoundException
from visapilot.shared.models import parse_object_id
from visapilot.shared.sequences import INVOICE_PREFIX, next_display_id


class InvoiceService:
    """Service class for invoices."""
    
    @staticmethod
    async def create_invoice(db: Database, request: CreateInvoiceRequest, created_by: User) -> Invoice:
        """Create an invoice with computed totals and the next invoice number."""
        client_ref = None
        if request.client_id:
            client = await Client.get(parse_object_id(request.client_id, "Client not found"))
            if not client:
                raise NotFoundException("Client not found")
            client_ref = client.id
        
        invoice_number = await next_display_id(db, INVOICE_PREFIX)
        
        invoice = Invoice(
            invoice_number=invoice_number,
            visa_application_id=request.visa_application_id,
            client_ref=client_ref,
            client_name=request.client_name.strip(),
            client_email=request.client_email.lower(),
            items=[InvoiceItem(**item.model_dump()) for item in request.items],
            tax_rate=request.tax_rate,
            deposit_amount=request.deposit_amount,
            currency=request.currency,
            due_date=request.due_date,
            status=request.status,
            notes=request.notes,
            created_by=created_by.email,
        )
        invoice.recalculate()
        invoice.stamp_status()
        await invoice.insert()
        
        logger.info(f"Created invoice {invoice_number} for {invoice.client_name} ({invoice.total_amount} {invoice.currency})")
        return invoice
    
    @staticmethod
    async def list_invoices(
        search: Optional[str],
        status: Optional[str],
        client_id: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[Invoice], int]:
        conditions = []
        if search and search.strip():
            pattern = re.escape(search.strip())
            conditions.append(Or(
                RegEx(Invoice.invoice_number, pattern, "i"),
                RegEx(Invoice.client_name, pattern, "i"),
                RegEx(Invoice.client_email, pattern, "i"),
            ))
        if status:
            conditions.append(Invoice.status == status)
        if client_id:
            conditions.append(Invoice.client_ref == parse_object_id(client_id, "Client not found"))
        
        query = Invoice.find(*conditions)
        total = await query.count()
        invoices = await query.sort([("created_at", -1), ("_id", -1)]).skip(skip).limit(limit).to_list()
        return invoices, total
    
    @staticmethod
    async def get_invoice(invoice_id: str) -> Invoice:
        invoice = await Invoice.get(parse_object_id(invoice_id, "Invoice not found"))
        if not invoice:
            raise NotFoundException("Invoice not found")
        return invoice
    
    @staticmethod
    async def update_invoice(invoice_id: str, request: UpdateInvoiceRequest) -> Invoice:
        """Merge provided fields; totals are recomputed from the result."""
        invoice = await InvoiceService.get_invoice(invoice_id)
        
        update_dict = request.model_dump(exclude_unset=True)
        if "items" in update_dict:
            update_dict["items"] = [InvoiceItem(**item) for item in update_dict["items"] or []]
        if update_dict.get("client_email"):
            update_dict["client_email"] = update_dict["client_email"].lower()
        
        for field, value in update_dict.items():
            setattr(invoice, field, value)
        
        invoice.recalculate()
        invoice.stamp_status()
        invoice.update_timestamp()
        await invoice.save()
        
        logger.info(f"Updated invoice {invoice.invoice_number} (status: {invoice.status})")
        return invoice
    
    @staticmethod
    async def delete_invoice(invoice_id: str) -> None:
        invoice = await InvoiceService.get_invoice(invoice_id)
        await invoice.delete()
        logger.info(f"Deleted invoice {invoice.invoice_number}")
    
    @staticmethod
    def invoice_to_response(invoice: Invoice) -> InvoiceResponse:
        return InvoiceResponse(
            id=str(invoice.id),
            client_id=str(invoice.client_ref) if invoice.client_ref else None,
            **invoice.model_dump(exclude={"id", "revision_id", "client_ref"}),
        )


class PaymentService:
    """Service class for payments."""
    
    @staticmethod
    async def create_payment(request: PaymentRequest) -> Payment:
        payment = Payment(**request.model_dump())
        await payment.insert()
        logger.info(f"Recorded payment {payment.id} for application {payment.application_id}")
        return payment
    
    @staticmethod
    async def list_payments(
        search: Optional[str],
        status: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[Payment], int]:
        conditions = []
        if search and search.strip():
            pattern = re.escape(search.strip())
            conditions.append(Or(
                RegEx(Payment.application_id, pattern, "i"),
                RegEx(Payment.agent, pattern, "i"),
            ))
        if status:
            conditions.append(Payment.status == status)
        
        query = Payment.find(*conditions)
        total = await query.count()
        payments = await query.sort([("created_at", -1), ("_id", -1)]).skip(skip).limit(limit).to_list()
        return payments, total
    
    @staticmethod
    async def get_payment(payment_id: str) -> Payment:
        payment = await Payment.get(parse_object_id(payment_id, "Payment not found"))
        if not payment:
            raise NotFoundException("Payment not found")
        return payment
    
    @staticmethod
    async def update_payment(payment_id: str, request: UpdatePaymentRequest) -> Payment:
        payment = await PaymentService.get_payment(payment_id)
        for field, value in request.model_dump(exclude_unset=True).items():
            setattr(payment, field, value)
        payment.update_timestamp()
        await payment.save()
        logger.info(f"Updated payment {payment.id} (status: {payment.status})")
        return payment
    
    @staticmethod
    async def delete_payment(payment_id: str) -> None:
        payment = await PaymentService.get_payment(payment_id)
        await payment.delete()
        logger.info(f"Deleted payment {payment_id}")
    
    @staticmethod
    def payment_to_response(payment: Payment) -> PaymentResponse:
        return PaymentResponse(id=str(payment.id), **payment.model_dump(exclude={"id", "revision_id"}))


class FeeStructureService:
    """Service class for fee structures."""
    
    @staticmethod
    async def create_fee_structure(request: FeeStructureRequest) -> FeeStructure:
        fee_structure = FeeStructure(**request.model_dump())
        await fee_structure.insert()
        logger.info(f"Created fee structure {fee_structure.name}")
        return fee_structure
    
    @staticmethod
    async def list_fee_structures(
        search: Optional[str],
        active_only: bool,
        skip: int,
        limit: int,
    ) -> Tuple[List[FeeStructure], int]:
        conditions = []
        if search and search.strip():
            conditions.append(RegEx(FeeStructure.name, re.escape(search.strip()), "i"))
        if active_only:
            conditions.append(FeeStructure.is_active == True)
        
        query = FeeStructure.find(*conditions)
        total = await query.count()
        fee_structures = await query.sort([("name", 1), ("_id", -1)]).skip(skip).limit(limit).to_list()
        return fee_structures, total
    
    @staticmethod
    async def get_fee_structure(fee_structure_id: str) -> FeeStructure:
        fee_structure = await FeeStructure.get(parse_object_id(fee_structure_id, "Fee structure not found"))
        if not fee_structure:
            raise NotFoundException("Fee structure not found")
        return fee_structure
    
    @staticmethod
    async def update_fee_structure(fee_structure_id: str, request: UpdateFeeStructureRequest) -> FeeStructure:
        fee_structure = await FeeStructureService.get_fee_structure(fee_structure_id)
        for field, value in request.model_dump(exclude_unset=True).items():
            setattr(fee_structure, field, value)
        fee_structure.update_timestamp()
        await fee_structure.save()
        logger.info(f"Updated fee structure {fee_structure.name}")
        return fee_structure
    
    @staticmethod
    async def delete_fee_structure(fee_structure_id: str) -> None:
        fee_structure = await FeeStructureService.get_fee_structure(fee_structure_id)
        await fee_structure.delete()
        logger.info(f"Deleted fee structure {fee_structure.name}")
    
    @staticmethod
    def fee_structure_to_response(fee_structure: FeeStructure) -> FeeStructureResponse:
        return FeeStructureResponse(
            id=str(fee_structure.id),
            total_fee=fee_structure.government_fee + fee_structure.service_fee,
            **fee_structure.model_dump(exclude={"id", "revision_id"}),
        )
