# Knowledge Help Feature - Models

from typing import List, Literal
from datetime import datetime
from beanie import Document
from pydantic import Field


class VisaKnowledge(Document):
    """Requirements and practical notes for a country's visa type."""
    
    country: str
    visa_type: str
    requirements: List[str] = Field(default_factory=list)
    processing_time: str
    fees: str
    difficulty: Literal["Easy", "Medium", "Hard"]
    tips: str
    last_updated: datetime = Field(default_factory=datetime.utcnow)
    
    class Settings:
        name = "visa_knowledge"


class SOPDocument(Document):
    """Versioned standard operating procedure."""
    
    title: str
    type: str
    country: str
    version: str
    content: str
    author: str
    last_updated: datetime = Field(default_factory=datetime.utcnow)
    
    class Settings:
        name = "sop_documents"


class LearningGuideline(Document):
    """Training module for agency staff."""
    
    title: str
    category: str
    duration: str
    level: Literal["Beginner", "Intermediate", "Advanced"]
    completed: bool = False
    rating: float = 0
    enrolled: int = 0
    
    class Settings:
        name = "learning_guidelines"


class RejectionTip(Document):
    """A common refusal reason with how to avoid it."""
    
    country: str
    visa_type: str
    tip_category: str
    title: str
    description: str
    solution: str
    example: str
    
    class Settings:
        name = "rejection_tips"
