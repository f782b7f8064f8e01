# Accounting Feature - Router

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from visapilot.config import settings
from visapilot.features.accounting.models import TransactionType
from visapilot.features.accounting.schemas import (
    AccountingSummaryResponse,
    CommissionRequest,
    CommissionResponse,
    TransactionListResponse,
    TransactionRequest,
    TransactionResponse,
)
from visapilot.features.accounting.service import AccountingService
from visapilot.features.auth.dependencies import get_current_user
from visapilot.features.auth.models import User
from visapilot.shared.schemas import page_fields


router = APIRouter(prefix="/accounting", tags=["Accounting"])


@router.get("", response_model=AccountingSummaryResponse)
async def get_accounting_summary(
    current_user: User = Depends(get_current_user)
):
    """
    Revenue, expenses, net profit, profit margin, commissions paid out,
    and the ten most recent transactions.
    """
    return await AccountingService.get_summary()


@router.get("/transactions", response_model=TransactionListResponse)
async def list_transactions(
    transaction_type: Optional[TransactionType] = Query(None, alias="type"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
    current_user: User = Depends(get_current_user)
):
    """
    List ledger entries, most recent date first.
    
    - **type**: revenue | expense
    """
    limit = settings.clamp_limit(limit)
    transactions, total = await AccountingService.list_transactions(
        transaction_type, (page - 1) * limit, limit
    )
    
    return TransactionListResponse(
        transactions=[AccountingService.transaction_to_response(t) for t in transactions],
        **page_fields(total, page, limit),
    )


@router.post("/transactions", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    request: TransactionRequest,
    current_user: User = Depends(get_current_user)
):
    transaction = await AccountingService.create_transaction(request, current_user)
    return AccountingService.transaction_to_response(transaction)


@router.get("/commissions", response_model=List[CommissionResponse])
async def list_commissions(
    current_user: User = Depends(get_current_user)
):
    """The 100 most recently recorded commissions."""
    commissions = await AccountingService.list_recent_commissions()
    return [AccountingService.commission_to_response(c) for c in commissions]


@router.post("/commissions", response_model=CommissionResponse, status_code=status.HTTP_201_CREATED)
async def create_commission(
    request: CommissionRequest,
    current_user: User = Depends(get_current_user)
):
    """
    Record a commission.
    
    When **commissionEarned** is omitted it is derived from
    totalAmount x commissionRate / 100.
    """
    commission = await AccountingService.create_commission(request)
    return AccountingService.commission_to_response(commission)
