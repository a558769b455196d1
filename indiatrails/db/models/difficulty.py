"""
Difficulty model - fixed Easy/Medium/Hard rating, seeded by the initial migration.
"""

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from indiatrails.db.base import Base


class Difficulty(Base):
    __tablename__ = "difficulties"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<Difficulty(id={self.id}, name={self.name})>"
