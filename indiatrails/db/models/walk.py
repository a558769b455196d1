"""
Walk model - a trail belonging to one region and rated with one difficulty.
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from indiatrails.db.base import Base

if TYPE_CHECKING:
    from indiatrails.db.models.difficulty import Difficulty
    from indiatrails.db.models.region import Region


class Walk(Base):
    """Walk entity. Region and difficulty are eager-loaded by the repository (no lazy IO in async)."""

    __tablename__ = "walks"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    length_in_km: Mapped[float] = mapped_column(Float, nullable=False)
    walk_image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    difficulty_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("difficulties.id", ondelete="CASCADE"), nullable=False, index=True
    )
    region_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("regions.id", ondelete="CASCADE"), nullable=False, index=True
    )

    region: Mapped["Region"] = relationship("Region", back_populates="walks")
    difficulty: Mapped["Difficulty"] = relationship("Difficulty")

    def __repr__(self) -> str:
        return f"<Walk(id={self.id}, name={self.name})>"
