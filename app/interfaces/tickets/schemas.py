"""
Pydantic schemas for tickets API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Request schema for the login endpoint.

    Attributes:
        username: Account name.
        pwd: Account password.
    """

    username: str = Field(..., description="Account name")
    pwd: str = Field(..., description="Account password")


class LoginStatus(BaseModel):
    success: bool


class LoginResponse(BaseModel):
    """Response schema for a successful login."""

    result: LoginStatus


class TicketForCreateRequest(BaseModel):
    """Request schema for ticket creation."""

    title: str = Field(..., description="Ticket title")


class TicketResponse(BaseModel):
    """A single ticket as returned to clients.

    ``owner_id`` is serialized as ``ownerId``.
    """

    id: int
    owner_id: int = Field(..., serialization_alias="ownerId")
    title: str


class ErrorBody(BaseModel):
    type: str
    req_uuid: str


class ErrorEnvelope(BaseModel):
    """Error payload produced by the response mapper for every failure."""

    error: ErrorBody


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
