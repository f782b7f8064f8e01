"""MongoDB database connection manager."""

from typing import Optional

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient
from fastapi import Request
from pymongo import ReturnDocument

from visapilot.config import Settings
from visapilot.core.logging import logger


class Database:
    """Owns the Mongo client for one application instance.
    
    Built once in the application lifespan and handed to request
    handlers through the ``get_database`` dependency.
    """
    
    COUNTERS_COLLECTION = "counters"
    
    def __init__(self, client: AsyncIOMotorClient, name: str):
        self.client = client
        self.name = name
        self.db = client[name]
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Create a manager with a new client for the configured URL."""
        return cls(AsyncIOMotorClient(settings.MONGODB_URL), settings.DATABASE_NAME)
    
    async def connect(self):
        """Initialize Beanie with every document model."""
        from visapilot.features.auth.models import User
        from visapilot.features.clients.models import Client
        from visapilot.features.patients.models import Patient
        from visapilot.features.appointments.models import Appointment
        from visapilot.features.billing.models import Invoice, Payment, FeeStructure
        from visapilot.features.visa_applications.models import VisaApplication
        from visapilot.features.accounting.models import Transaction, Commission
        from visapilot.features.settings.models import SystemSettings
        from visapilot.features.notifications.models import Notification, NotificationTemplate
        from visapilot.features.forms.models import FormTemplate
        from visapilot.features.knowledge.models import (
            VisaKnowledge,
            SOPDocument,
            LearningGuideline,
            RejectionTip,
        )
        
        await init_beanie(
            database=self.db,
            document_models=[
                User,
                Client,
                Patient,
                Appointment,
                Invoice,
                Payment,
                FeeStructure,
                VisaApplication,
                Transaction,
                Commission,
                SystemSettings,
                NotificationTemplate,
                Notification,
                FormTemplate,
                VisaKnowledge,
                SOPDocument,
                LearningGuideline,
                RejectionTip,
            ]
        )
        
        logger.info(f"Connected to MongoDB database: {self.name}")
    
    def close(self):
        """Close MongoDB connection."""
        self.client.close()
        logger.info("Closed MongoDB connection")
    
    async def next_sequence(self, name: str) -> int:
        """Atomically increment and return the named counter."""
        counter = await self.db[self.COUNTERS_COLLECTION].find_one_and_update(
            {"_id": name},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return counter["seq"]


def get_database(request: Request) -> Database:
    """Dependency for database access."""
    database: Optional[Database] = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database has not been initialised")
    return database
