"""User API schemas."""

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """Current user (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    role: str
    is_active: bool
