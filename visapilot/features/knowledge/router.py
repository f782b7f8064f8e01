# Knowledge Help Feature - Router

from typing import Optional

from fastapi import APIRouter, Depends, status

from visapilot.features.auth.dependencies import get_current_user
from visapilot.features.auth.models import User
from visapilot.features.knowledge.schemas import KnowledgeEntryRequest
from visapilot.features.knowledge.service import KnowledgeService
from visapilot.shared.schemas import MessageResponse


router = APIRouter(prefix="/knowledge-help", tags=["Knowledge Help"])


@router.get("")
async def get_knowledge(
    type: Optional[str] = None,
    current_user: User = Depends(get_current_user)
):
    """
    Knowledge-help content.
    
    - **type**: visa-knowledge | sop-docs | learning-guidelines | rejection-tips.
      Omit to receive all four grouped by kind.
    """
    if type is None:
        return await KnowledgeService.list_all()
    
    kind = KnowledgeService.resolve_kind(type)
    return await KnowledgeService.list_entries(kind)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_knowledge_entry(
    request: KnowledgeEntryRequest,
    current_user: User = Depends(get_current_user)
):
    kind = KnowledgeService.resolve_kind(request.type)
    document = await KnowledgeService.create_entry(kind, request.payload())
    return KnowledgeService.to_response(kind, document)


@router.put("")
async def update_knowledge_entry(
    request: KnowledgeEntryRequest,
    current_user: User = Depends(get_current_user)
):
    """Update an entry. Visa knowledge and SOP documents get a fresh lastUpdated."""
    kind = KnowledgeService.resolve_kind(request.type)
    document = await KnowledgeService.update_entry(kind, request.id, request.payload())
    return KnowledgeService.to_response(kind, document)


@router.delete("", response_model=MessageResponse)
async def delete_knowledge_entry(
    type: Optional[str] = None,
    id: Optional[str] = None,
    current_user: User = Depends(get_current_user)
):
    kind = KnowledgeService.resolve_kind(type)
    await KnowledgeService.delete_entry(kind, id)
    return MessageResponse(message=f"{kind.label} deleted")
