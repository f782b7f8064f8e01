# Accounting Feature - Service

import asyncio
from typing import List, Optional, Tuple

from visapilot.core.logging import logger
from visapilot.features.accounting.models import Commission, Transaction
from visapilot.features.accounting.schemas import (
    AccountingSummaryResponse,
    CommissionRequest,
    CommissionResponse,
    TransactionRequest,
    TransactionResponse,
)
from visapilot.features.auth.models import User
from visapilot.features.clients.models import Client
from visapilot.shared.exceptions import BadRequestException, NotFoundException
from visapilot.shared.models import parse_object_id


RECENT_TRANSACTIONS = 10
RECENT_COMMISSIONS = 100


def profit_margin(net_profit: float, total_revenue: float) -> float:
    """Net profit as a percentage of revenue, 0 when there is no revenue."""
    if not total_revenue:
        return 0.0
    return round(net_profit / total_revenue * 100, 2)


class AccountingService:
    """Service class for the ledger and agent commissions."""
    
    @staticmethod
    async def get_summary() -> AccountingSummaryResponse:
        """
        Aggregate revenue, expenses and commissions.
        
        The four reads are independent and run concurrently.
        """
        total_revenue, total_expenses, total_commission, recent = await asyncio.gather(
            Transaction.find(Transaction.type == "revenue").sum(Transaction.amount),
            Transaction.find(Transaction.type == "expense").sum(Transaction.amount),
            Commission.find().sum(Commission.commission_earned),
            Transaction.find().sort([("date", -1), ("created_at", -1), ("_id", -1)]).limit(RECENT_TRANSACTIONS).to_list(),
        )
        
        total_revenue = total_revenue or 0.0
        total_expenses = total_expenses or 0.0
        net_profit = total_revenue - total_expenses
        
        return AccountingSummaryResponse(
            total_revenue=total_revenue,
            total_expenses=total_expenses,
            net_profit=net_profit,
            profit_margin=profit_margin(net_profit, total_revenue),
            total_commission_earned=total_commission or 0.0,
            transactions=[AccountingService.transaction_to_response(t) for t in recent],
        )
    
    # ============== Transactions ==============
    
    @staticmethod
    async def create_transaction(request: TransactionRequest, recorded_by: User) -> Transaction:
        client_ref = None
        client_name = request.client_name
        if request.client_id:
            client = await Client.get(parse_object_id(request.client_id, "Client not found"))
            if not client:
                raise NotFoundException("Client not found")
            client_ref = client.id
            client_name = client_name or client.full_name
        
        transaction = Transaction(
            description=request.description.strip(),
            client_ref=client_ref,
            client_name=client_name or "Unknown Client",
            amount=request.amount,
            type=request.type,
            category=request.category.strip(),
            date=request.date.isoformat(),
            application_id=request.application_id,
            user_id=str(recorded_by.id),
            notes=request.notes,
        )
        await transaction.insert()
        
        logger.info(f"Recorded {transaction.type} of {transaction.amount} ({transaction.category})")
        return transaction
    
    @staticmethod
    async def list_transactions(
        transaction_type: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[Transaction], int]:
        query = Transaction.find(Transaction.type == transaction_type) if transaction_type else Transaction.find()
        total = await query.count()
        transactions = await query.sort([("date", -1), ("created_at", -1), ("_id", -1)]).skip(skip).limit(limit).to_list()
        return transactions, total
    
    @staticmethod
    def transaction_to_response(transaction: Transaction) -> TransactionResponse:
        return TransactionResponse(
            id=str(transaction.id),
            client_id=str(transaction.client_ref) if transaction.client_ref else None,
            **transaction.model_dump(exclude={"id", "revision_id", "client_ref"}),
        )
    
    # ============== Commissions ==============
    
    @staticmethod
    async def create_commission(request: CommissionRequest) -> Commission:
        if request.commission_rate < 0 or request.commission_rate > 100:
            raise BadRequestException("Commission rate must be between 0 and 100")
        
        commission_earned = request.commission_earned
        if commission_earned is None:
            commission_earned = request.total_amount * request.commission_rate / 100
        
        commission = Commission(
            agent_id=request.agent_id,
            agent_name=request.agent_name,
            period=request.period,
            transactions_count=request.transactions_count,
            total_amount=request.total_amount,
            commission_rate=request.commission_rate,
            commission_earned=commission_earned,
            status=request.status,
            payment_date=request.payment_date,
            notes=request.notes.strip(),
        )
        await commission.insert()
        
        logger.info(f"Recorded commission of {commission_earned} for {commission.agent_name} ({commission.period})")
        return commission
    
    @staticmethod
    async def list_recent_commissions() -> List[Commission]:
        return await Commission.find().sort([("created_at", -1), ("_id", -1)]).limit(RECENT_COMMISSIONS).to_list()
    
    @staticmethod
    def commission_to_response(commission: Commission) -> CommissionResponse:
        return CommissionResponse(id=str(commission.id), **commission.model_dump(exclude={"id", "revision_id"}))
