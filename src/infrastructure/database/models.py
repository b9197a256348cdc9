"""SQLAlchemy ORM models."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Float,
    ForeignKey,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class ProfileModel(Base):
    """Person whose volunteering is logged."""

    __tablename__ = "profiles"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Relationships
    entries: Mapped[list["EntryModel"]] = relationship(
        "EntryModel",
        back_populates="profile",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class EntryModel(Base):
    """One volunteering session."""

    __tablename__ = "entries"
    __table_args__ = (CheckConstraint("hours >= 0", name="ck_entries_hours_non_negative"),)

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    profile_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    place: Mapped[str] = mapped_column(String(255), nullable=False)
    # ISO YYYY-MM-DD; lexicographic order equals chronological order
    date: Mapped[str] = mapped_column(String(10), nullable=False)
    hours: Mapped[float] = mapped_column(Float, nullable=False)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    # Relationships
    profile: Mapped["ProfileModel"] = relationship("ProfileModel", back_populates="entries")
