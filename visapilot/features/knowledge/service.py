# Knowledge Help Feature - Service

import asyncio
from datetime import datetime
from typing import Any, Dict, List, NamedTuple, Optional, Type

from beanie import Document
from pydantic import ValidationError

from visapilot.core.logging import logger
from visapilot.features.knowledge.models import (
    LearningGuideline,
    RejectionTip,
    SOPDocument,
    VisaKnowledge,
)
from visapilot.features.knowledge.schemas import (
    KnowledgeBaseResponse,
    LearningGuidelineResponse,
    LearningGuidelineSchema,
    LearningGuidelineUpdate,
    RejectionTipResponse,
    RejectionTipSchema,
    RejectionTipUpdate,
    SOPDocumentResponse,
    SOPDocumentSchema,
    SOPDocumentUpdate,
    VisaKnowledgeResponse,
    VisaKnowledgeSchema,
    VisaKnowledgeUpdate,
)
from visapilot.shared.exceptions import BadRequestException, NotFoundException
from visapilot.shared.models import parse_object_id
from visapilot.shared.schemas import CamelModel


class KnowledgeKind(NamedTuple):
    document: Type[Document]
    create_schema: Type[CamelModel]
    update_schema: Type[CamelModel]
    response_schema: Type[CamelModel]
    label: str
    stamps_last_updated: bool


KINDS: Dict[str, KnowledgeKind] = {
    "visa-knowledge": KnowledgeKind(
        VisaKnowledge, VisaKnowledgeSchema, VisaKnowledgeUpdate, VisaKnowledgeResponse, "Entry", True
    ),
    "sop-docs": KnowledgeKind(
        SOPDocument, SOPDocumentSchema, SOPDocumentUpdate, SOPDocumentResponse, "Document", True
    ),
    "learning-guidelines": KnowledgeKind(
        LearningGuideline, LearningGuidelineSchema, LearningGuidelineUpdate, LearningGuidelineResponse, "Guideline", False
    ),
    "rejection-tips": KnowledgeKind(
        RejectionTip, RejectionTipSchema, RejectionTipUpdate, RejectionTipResponse, "Tip", False
    ),
}


def _validation_message(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )


class KnowledgeService:
    """Service class for the four knowledge-help collections."""
    
    @staticmethod
    def resolve_kind(kind: Optional[str]) -> KnowledgeKind:
        if kind not in KINDS:
            raise BadRequestException("Invalid request")
        return KINDS[kind]
    
    @staticmethod
    def to_response(kind: KnowledgeKind, document: Document) -> CamelModel:
        return kind.response_schema(id=str(document.id), **document.model_dump(exclude={"id", "revision_id"}))
    
    @staticmethod
    async def list_entries(kind: KnowledgeKind) -> List[CamelModel]:
        documents = await kind.document.find().sort([("_id", 1)]).to_list()
        return [KnowledgeService.to_response(kind, d) for d in documents]
    
    @staticmethod
    async def list_all() -> KnowledgeBaseResponse:
        """All four collections, fetched concurrently."""
        visa_knowledge, sop_docs, learning_guidelines, rejection_tips = await asyncio.gather(
            KnowledgeService.list_entries(KINDS["visa-knowledge"]),
            KnowledgeService.list_entries(KINDS["sop-docs"]),
            KnowledgeService.list_entries(KINDS["learning-guidelines"]),
            KnowledgeService.list_entries(KINDS["rejection-tips"]),
        )
        return KnowledgeBaseResponse(
            visa_knowledge=visa_knowledge,
            sop_docs=sop_docs,
            learning_guidelines=learning_guidelines,
            rejection_tips=rejection_tips,
        )
    
    @staticmethod
    async def get_entry(kind: KnowledgeKind, entry_id: Optional[str]) -> Document:
        not_found = f"{kind.label} not found"
        if not entry_id:
            raise NotFoundException(not_found)
        document = await kind.document.get(parse_object_id(entry_id, not_found))
        if not document:
            raise NotFoundException(not_found)
        return document
    
    @staticmethod
    async def create_entry(kind: KnowledgeKind, payload: Optional[Dict[str, Any]]) -> Document:
        if payload is None:
            raise BadRequestException("Invalid request")
        try:
            data = kind.create_schema.model_validate(payload)
        except ValidationError as exc:
            raise BadRequestException(_validation_message(exc))
        
        document = kind.document(**data.model_dump())
        await document.insert()
        logger.info(f"Created {kind.label.lower()} {document.id} in {kind.document.Settings.name}")
        return document
    
    @staticmethod
    async def update_entry(kind: KnowledgeKind, entry_id: Optional[str], payload: Optional[Dict[str, Any]]) -> Document:
        document = await KnowledgeService.get_entry(kind, entry_id)
        try:
            data = kind.update_schema.model_validate(payload or {})
        except ValidationError as exc:
            raise BadRequestException(_validation_message(exc))
        
        for field, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(document, field, value)
        if kind.stamps_last_updated:
            document.last_updated = datetime.utcnow()
        
        await document.save()
        logger.info(f"Updated {kind.label.lower()} {document.id} in {kind.document.Settings.name}")
        return document
    
    @staticmethod
    async def delete_entry(kind: KnowledgeKind, entry_id: Optional[str]) -> None:
        document = await KnowledgeService.get_entry(kind, entry_id)
        await document.delete()
        logger.info(f"Deleted {kind.label.lower()} {entry_id} from {kind.document.Settings.name}")
