from typing import Optional

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    # Uniqueness is enforced by UserService, not by the table
    email: str = Field(index=True)
    password: str  # stored as given, never returned by the API


class UserDTO(SQLModel):
    """Public view of a user. Also the update input (its id is ignored there)."""

    id: Optional[int] = None
    name: str
    email: str


class UserPrivateDTO(SQLModel):
    """Creation input, the only shape that carries a password."""

    name: str
    email: str
    password: str
