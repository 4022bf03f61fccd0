"""
Pydantic models for user data.

``User`` is both the persisted record and the API representation.
``UserPayload`` is the request body accepted by the create and update
endpoints.  Its fields are optional on purpose: presence and format
checks are made by the endpoints so that bad input is reported as a
400 with a readable message rather than as a schema error.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ROLE = "user"


class User(BaseModel):
    """A user record as stored in the data file."""

    id: int = Field(..., gt=0, examples=[1])
    name: str = Field(..., examples=["Jean Dupont"])
    email: str = Field(..., examples=["jean.dupont@email.com"])
    role: str = Field(DEFAULT_ROLE, examples=["user"])


class UserPayload(BaseModel):
    """Body of ``POST /api/users`` and ``PUT /api/users/{id}``.

    Any other key sent by the client, ``role`` included, is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, examples=["Ana"])
    email: Optional[str] = Field(None, examples=["ana@example.com"])


class MessageResponse(BaseModel):
    message: str
