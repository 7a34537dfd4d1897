"""User record model"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    One roster entry.

    On disk and in HTML forms the record uses the keys mail and type;
    in Python they are email and role.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = ""
    surname: str = ""
    email: str = Field(alias="mail")
    password: str = ""
    role: Literal["user", "admin"] = Field(default="user", alias="type")

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def to_record(self) -> dict:
        """Serialize with the on-disk keys"""
        return self.model_dump(by_alias=True)
