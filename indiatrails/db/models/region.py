"""
Region model - a named geographic grouping that owns walks.
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from indiatrails.db.base import Base

if TYPE_CHECKING:
    from indiatrails.db.models.walk import Walk


class Region(Base):
    """Region entity. Deleting a region removes its walks (ON DELETE CASCADE)."""

    __tablename__ = "regions"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    code: Mapped[str] = mapped_column(String(10), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    region_image_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    walks: Mapped[list["Walk"]] = relationship(
        "Walk",
        back_populates="region",
        cascade="all",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Region(id={self.id}, code={self.code})>"
