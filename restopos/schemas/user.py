from enum import Enum

from pydantic import BaseModel


class Role(str, Enum):
    admin = "admin"
    staff = "staff"


class Actor(BaseModel):
    username: str
    role: Role

    class Config:
        frozen = True

    @property
    def is_admin(self) -> bool:
        return self.role == Role.admin
