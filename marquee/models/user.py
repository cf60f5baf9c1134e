import uuid
from sqlalchemy import Column, String, Boolean, DateTime, JSON
from sqlalchemy.sql import func
from marquee.database import Base

ADMIN_ROLE = "Admin"


def generate_user_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_user_id)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    nickname = Column(String(100), nullable=True)
    roles = Column(JSON, nullable=False, default=list)  # ["Admin"]
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    @property
    def display_name(self) -> str:
        """Nickname when set, otherwise the local part of the email"""
        if self.nickname and self.nickname.strip():
            return self.nickname
        return (self.email or "").split("@")[0]

    def is_in_role(self, role: str) -> bool:
        return role in (self.roles or [])

    @property
    def is_admin(self) -> bool:
        return self.is_in_role(ADMIN_ROLE)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
