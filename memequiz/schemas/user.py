"""User request/response schemas - API contract."""

from pydantic import BaseModel


class Credentials(BaseModel):
    """Body of /login and /register. No rules beyond presence."""

    username: str
    password: str


class MessageResponse(BaseModel):
    message: str
