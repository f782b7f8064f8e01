from datetime import datetime

from beanie import PydanticObjectId
from bson.errors import InvalidId
from pydantic import BaseModel, Field

from visapilot.shared.exceptions import NotFoundException


class TimestampMixin(BaseModel):
    """Mixin for adding timestamp fields to documents."""
    
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
    
    def update_timestamp(self):
        """Update the updated_at timestamp."""
        self.updated_at = datetime.utcnow()


def parse_object_id(value: str, detail: str = "Resource not found") -> PydanticObjectId:
    """Parse a path id, treating malformed ids as missing documents."""
    try:
        return PydanticObjectId(value)
    except (InvalidId, TypeError):
        raise NotFoundException(detail)
