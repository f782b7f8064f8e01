# Client Management Feature - Router

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from visapilot.config import settings
from visapilot.database import Database, get_database
from visapilot.features.auth.dependencies import get_current_user
from visapilot.features.auth.models import User
from visapilot.features.clients.schemas import (
    ClientListResponse,
    ClientResponse,
    CreateClientRequest,
    UpdateClientRequest,
)
from visapilot.features.clients.service import ClientService
from visapilot.shared.exceptions import BadRequestException
from visapilot.shared.schemas import MessageResponse, page_fields


router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get("", response_model=ClientListResponse)
async def list_clients(
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
    current_user: User = Depends(get_current_user)
):
    """
    List clients, newest first.
    
    - **search**: Case-insensitive match on first/last name, email or client ID
    - **page** / **limit**: Pagination (limit is capped)
    """
    limit = settings.clamp_limit(limit)
    clients, total = await ClientService.list_clients(search, (page - 1) * limit, limit)
    
    return ClientListResponse(
        clients=[ClientService.client_to_response(c) for c in clients],
        **page_fields(total, page, limit),
    )


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    request: CreateClientRequest,
    db: Database = Depends(get_database),
    current_user: User = Depends(get_current_user)
):
    """
    Create a new client. The response carries the generated Client ID.
    """
    client = await ClientService.create_client(db, request)
    return ClientService.client_to_response(client)


@router.get("/search", response_model=List[ClientResponse])
async def search_clients(
    q: Optional[str] = None,
    limit: int = Query(10, ge=1),
    current_user: User = Depends(get_current_user)
):
    """
    Quick lookup for pickers.
    
    - **q**: Required search text
    """
    if not q or not q.strip():
        raise BadRequestException('Query parameter "q" is required')
    
    clients = await ClientService.search_clients(q, settings.clamp_limit(limit))
    return [ClientService.client_to_response(c) for c in clients]


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: str,
    current_user: User = Depends(get_current_user)
):
    """Get a client by id."""
    client = await ClientService.get_client(client_id)
    return ClientService.client_to_response(client)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: str,
    request: UpdateClientRequest,
    current_user: User = Depends(get_current_user)
):
    """Update a client's information."""
    client = await ClientService.update_client(client_id, request)
    return ClientService.client_to_response(client)


@router.delete("/{client_id}", response_model=MessageResponse)
async def delete_client(
    client_id: str,
    current_user: User = Depends(get_current_user)
):
    """
    Delete a client.
    
    Appointments that reference the client keep their copied contact details.
    """
    await ClientService.delete_client(client_id)
    return MessageResponse(message="Client deleted successfully")
