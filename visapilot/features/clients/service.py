# Client Management Feature - Service

import re
from typing import List, Optional, Tuple

from beanie.operators import Or, RegEx
from pymongo.errors import DuplicateKeyError

from visapilot.core.logging import logger
from visapilot.database import Database
from visapilot.features.clients.models import Client, build_emergency_contact
from visapilot.features.clients.schemas import (
    ClientResponse,
    CreateClientRequest,
    UpdateClientRequest,
)
from visapilot.shared.exceptions import ConflictException, NotFoundException
from visapilot.shared.models import parse_object_id
from visapilot.shared.schemas import clean_optional
from visapilot.shared.sequences import CLIENT_PREFIX, next_display_id


class ClientService:
    """Service class for client management operations."""
    
    @staticmethod
    def search_filter(term: str):
        pattern = re.escape(term.strip())
        return Or(
            RegEx(Client.first_name, pattern, "i"),
            RegEx(Client.last_name, pattern, "i"),
            RegEx(Client.email, pattern, "i"),
            RegEx(Client.client_id, pattern, "i"),
        )
    
    @staticmethod
    async def ensure_email_available(email: str, exclude_id=None) -> None:
        existing = await Client.find_one(Client.email == email)
        if existing and existing.id != exclude_id:
            raise ConflictException("A client with this email already exists")
    
    @staticmethod
    async def create_client(db: Database, request: CreateClientRequest) -> Client:
        """Create a client and assign its display id."""
        email = request.email.lower()
        await ClientService.ensure_email_available(email)
        
        client_id = await next_display_id(db, CLIENT_PREFIX)
        
        client = Client(
            client_id=client_id,
            first_name=request.first_name,
            last_name=request.last_name,
            email=email,
            phone=request.phone,
            date_of_birth=request.date_of_birth,
            gender=request.gender,
            address=clean_optional(request.address),
            city=clean_optional(request.city),
            state=clean_optional(request.state),
            zip_code=clean_optional(request.zip_code),
            passport_number=request.passport_number,
            passport_country=request.passport_country,
            visa_type=request.visa_type,
            visa_application_date=request.visa_application_date,
            visa_expiration_date=request.visa_expiration_date,
            special_requirements=request.special_requirements,
            current_applications=request.current_applications,
            travel_history=request.travel_history,
            emergency_contact=build_emergency_contact(request.emergency_contact),
        )
        
        try:
            await client.insert()
        except DuplicateKeyError:
            raise ConflictException("A client with this email already exists")
        
        logger.info(f"Created client {client_id}")
        return client
    
    @staticmethod
    async def list_clients(
        search: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[Client], int]:
        """Return one page of clients, newest first, plus the total count."""
        query = Client.find(ClientService.search_filter(search)) if search and search.strip() else Client.find()
        total = await query.count()
        clients = await query.sort([("created_at", -1), ("_id", -1)]).skip(skip).limit(limit).to_list()
        return clients, total
    
    @staticmethod
    async def search_clients(term: str, limit: int) -> List[Client]:
        return await Client.find(
            ClientService.search_filter(term)
        ).sort([("first_name", 1), ("last_name", 1)]).limit(limit).to_list()
    
    @staticmethod
    async def get_client(client_id: str) -> Client:
        """Get a client by primary key."""
        client = await Client.get(parse_object_id(client_id, "Client not found"))
        if not client:
            raise NotFoundException("Client not found")
        return client
    
    @staticmethod
    async def update_client(client_id: str, request: UpdateClientRequest) -> Client:
        """Merge the provided fields into an existing client."""
        client = await ClientService.get_client(client_id)
        
        update_dict = request.model_dump(exclude_unset=True)
        
        if update_dict.get("email"):
            update_dict["email"] = update_dict["email"].lower()
            await ClientService.ensure_email_available(update_dict["email"], exclude_id=client.id)
        
        if "emergency_contact" in update_dict:
            update_dict["emergency_contact"] = build_emergency_contact(request.emergency_contact)
        
        for field, value in update_dict.items():
            setattr(client, field, value)
        
        client.update_timestamp()
        await client.save()
        
        logger.info(f"Updated client {client.client_id}")
        return client
    
    @staticmethod
    async def delete_client(client_id: str) -> Client:
        client = await ClientService.get_client(client_id)
        await client.delete()
        logger.info(f"Deleted client {client.client_id}")
        return client
    
    @staticmethod
    def client_to_response(client: Client) -> ClientResponse:
        """Convert Client model to response schema."""
        return ClientResponse(
            id=str(client.id),
            **client.model_dump(exclude={"id", "revision_id"}),
        )
