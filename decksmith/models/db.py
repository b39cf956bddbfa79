"""
SQLAlchemy ORM models for persistent storage.

Models mirror the dataclass models but add database persistence.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import (
    JSON,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class DeckDB(Base):
    """
    A user-built deck stored in the database.

    Entries are ordered by insertion (entry id).
    """

    __tablename__ = "decks"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationship to deck entries
    entries: Mapped[list["DeckEntryDB"]] = relationship(
        back_populates="deck",
        cascade="all, delete-orphan",
        order_by="DeckEntryDB.id",
    )

    def __repr__(self) -> str:
        return f"<DeckDB(id={self.id}, name={self.name})>"


class DeckEntryDB(Base):
    """
    One card in a deck.

    Keeps a snapshot of the card record so a deck can be rebuilt
    without the catalog.
    """

    __tablename__ = "deck_entries"
    __table_args__ = (UniqueConstraint("deck_id", "card_reference", name="uq_deck_card"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    deck_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("decks.id", ondelete="CASCADE"), index=True
    )
    card_reference: Mapped[str] = mapped_column(String(255), index=True)
    quantity: Mapped[int] = mapped_column(Integer, default=1)

    # Catalog record of the card (camelCase keys)
    card: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)

    # Relationship back to deck
    deck: Mapped["DeckDB"] = relationship(back_populates="entries")

    def __repr__(self) -> str:
        return f"<DeckEntryDB(card={self.card_reference}, qty={self.quantity})>"
