# Knowledge Help Feature - Schemas

from typing import Any, Dict, List, Literal, Optional
from datetime import datetime
from pydantic import Field

from visapilot.shared.schemas import CamelModel


KnowledgeType = Literal["visa-knowledge", "sop-docs", "learning-guidelines", "rejection-tips"]


# ============== Entry payloads ==============

class VisaKnowledgeSchema(CamelModel):
    country: str = Field(..., min_length=1)
    visa_type: str = Field(..., min_length=1)
    requirements: List[str] = Field(default_factory=list)
    processing_time: str = Field(..., min_length=1)
    fees: str = Field(..., min_length=1)
    difficulty: Literal["Easy", "Medium", "Hard"]
    tips: str = Field(..., min_length=1)


class VisaKnowledgeUpdate(CamelModel):
    country: Optional[str] = Field(None, min_length=1)
    visa_type: Optional[str] = Field(None, min_length=1)
    requirements: Optional[List[str]] = None
    processing_time: Optional[str] = Field(None, min_length=1)
    fees: Optional[str] = Field(None, min_length=1)
    difficulty: Optional[Literal["Easy", "Medium", "Hard"]] = None
    tips: Optional[str] = Field(None, min_length=1)


class SOPDocumentSchema(CamelModel):
    title: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)


class SOPDocumentUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    type: Optional[str] = Field(None, min_length=1)
    country: Optional[str] = Field(None, min_length=1)
    version: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    author: Optional[str] = Field(None, min_length=1)


class LearningGuidelineSchema(CamelModel):
    title: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    duration: str = Field(..., min_length=1)
    level: Literal["Beginner", "Intermediate", "Advanced"]
    completed: bool = False
    rating: float = Field(0, ge=0, le=5)
    enrolled: int = Field(0, ge=0)


class LearningGuidelineUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    duration: Optional[str] = Field(None, min_length=1)
    level: Optional[Literal["Beginner", "Intermediate", "Advanced"]] = None
    completed: Optional[bool] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    enrolled: Optional[int] = Field(None, ge=0)


class RejectionTipSchema(CamelModel):
    country: str = Field(..., min_length=1)
    visa_type: str = Field(..., min_length=1)
    tip_category: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    solution: str = Field(..., min_length=1)
    example: str = Field(..., min_length=1)


class RejectionTipUpdate(CamelModel):
    country: Optional[str] = Field(None, min_length=1)
    visa_type: Optional[str] = Field(None, min_length=1)
    tip_category: Optional[str] = Field(None, min_length=1)
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    solution: Optional[str] = Field(None, min_length=1)
    example: Optional[str] = Field(None, min_length=1)


# ============== Responses ==============

class VisaKnowledgeResponse(VisaKnowledgeSchema):
    id: str
    last_updated: datetime


class SOPDocumentResponse(SOPDocumentSchema):
    id: str
    last_updated: datetime


class LearningGuidelineResponse(LearningGuidelineSchema):
    id: str


class RejectionTipResponse(RejectionTipSchema):
    id: str


class KnowledgeBaseResponse(CamelModel):
    visa_knowledge: List[VisaKnowledgeResponse]
    sop_docs: List[SOPDocumentResponse]
    learning_guidelines: List[LearningGuidelineResponse]
    rejection_tips: List[RejectionTipResponse]


# ============== Requests ==============

class KnowledgeEntryRequest(CamelModel):
    """
    Create or update an entry of one kind.
    
    The payload travels in ``entry``; the older per-kind keys
    (``doc``, ``guideline``, ``tip``) are still accepted.
    """
    type: Optional[str] = None
    id: Optional[str] = None
    entry: Optional[Dict[str, Any]] = None
    doc: Optional[Dict[str, Any]] = None
    guideline: Optional[Dict[str, Any]] = None
    tip: Optional[Dict[str, Any]] = None
    
    def payload(self) -> Optional[Dict[str, Any]]:
        for candidate in (self.entry, self.doc, self.guideline, self.tip):
            if candidate is not None:
                return candidate
        return None
