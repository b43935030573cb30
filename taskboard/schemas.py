from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, NaiveDatetime


class ErrorEnvelope(BaseModel):
    code: str
    message: str
    details: Optional[dict[str, Any]] = None
    requestId: Optional[str] = None


class Health(BaseModel):
    status: str = "ok"


class Version(BaseModel):
    version: str


class Credentials(BaseModel):
    username: str
    password: str


class UserOut(BaseModel):
    id: int
    username: str


class LoginOut(BaseModel):
    message: str
    username: str


class BoardIn(BaseModel):
    name: Optional[str] = None


class BoardOut(BaseModel):
    id: int
    name: Optional[str]


class ListIn(BaseModel):
    title: Optional[str] = None
    position: Optional[int] = None


class ListPatch(BaseModel):
    title: Optional[str] = None
    position: Optional[int] = None


class CardIn(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    position: Optional[int] = None
    dueDate: Optional[NaiveDatetime] = None
    labels: Optional[list[str]] = None


class CardPatch(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    position: Optional[int] = None
    dueDate: Optional[NaiveDatetime] = None
    labels: Optional[list[str]] = None


class CardMove(BaseModel):
    newListId: Optional[int] = None
    position: Optional[int] = None


class CardOut(BaseModel):
    id: int
    title: Optional[str]
    description: Optional[str]
    position: int
    dueDate: Optional[NaiveDatetime]
    labels: list[str]


class ListOut(BaseModel):
    id: int
    title: Optional[str]
    position: int
    cards: list[CardOut]
