from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.ext.associationproxy import AssociationProxy, association_proxy
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .db import Base


class Board(Base):
    __tablename__ = "boards"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String, nullable=True)

    lists: Mapped[list[TaskList]] = relationship(
        back_populates="board",
        cascade="all, delete-orphan",
        order_by=lambda: [TaskList.position, TaskList.id],
    )


class TaskList(Base):
    __tablename__ = "task_lists"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str | None] = mapped_column(String, nullable=True)
    position: Mapped[int] = mapped_column(Integer, default=0, index=True)
    board_id: Mapped[int] = mapped_column(ForeignKey("boards.id", ondelete="CASCADE"))

    board: Mapped[Board] = relationship(back_populates="lists")
    cards: Mapped[list[Card]] = relationship(
        back_populates="task_list",
        cascade="all, delete-orphan",
        order_by=lambda: [Card.position, Card.id],
    )


class Card(Base):
    __tablename__ = "cards"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str | None] = mapped_column(String, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    position: Mapped[int] = mapped_column(Integer, default=0, index=True)
    due_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    list_id: Mapped[int] = mapped_column(ForeignKey("task_lists.id", ondelete="CASCADE"))

    task_list: Mapped[TaskList] = relationship(back_populates="cards")
    label_rows: Mapped[list[CardLabel]] = relationship(
        cascade="all, delete-orphan",
        order_by=lambda: CardLabel.id,
    )

    labels: AssociationProxy[list[str]] = association_proxy(
        "label_rows", "value", creator=lambda value: CardLabel(value=value)
    )


class CardLabel(Base):
    __tablename__ = "card_labels"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    card_id: Mapped[int] = mapped_column(ForeignKey("cards.id", ondelete="CASCADE"))
    value: Mapped[str] = mapped_column(String)


class User(Base):
    __tablename__ = "users"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(256))
