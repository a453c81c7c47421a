"""User model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field


class User(BaseModel):
    """Listener account. Single-user mode uses the configured default user."""

    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    name: str
    email: str
    subscription: str = "Free"
    created_at: datetime = Field(default_factory=datetime.utcnow)

    @computed_field
    @property
    def initials(self) -> str:
        return "".join(part[0] for part in self.name.split() if part)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
