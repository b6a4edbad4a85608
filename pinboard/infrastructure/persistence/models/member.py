"""Member ORM model. One polaroid on the pinboard; only public members are searchable."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, String, Text, func
from sqlalchemy.dialects.postgresql import TSVECTOR
from sqlalchemy.orm import Mapped, mapped_column

from pinboard.infrastructure.persistence.database import Base


class Member(Base):
    """Member profile. Table: members.

    search_vector is maintained by a database trigger over name, role,
    company and bio; it is read-only here.
    """

    __tablename__ = "members"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    user_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    role: Mapped[str | None] = mapped_column(String(200), nullable=True, index=True)
    company: Mapped[str | None] = mapped_column(String(200), nullable=True, index=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    photo_url: Mapped[str | None] = mapped_column(String, nullable=True)
    pin_color: Mapped[str] = mapped_column(String(20), nullable=False, default="cherry")
    public_visibility: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, index=True
    )
    search_vector: Mapped[str | None] = mapped_column(TSVECTOR, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    # Recency ordering (relevance fallback, suggestion sample) reads this index.
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )

    __table_args__ = (
        Index("ix_members_search_vector", "search_vector", postgresql_using="gin"),
    )
