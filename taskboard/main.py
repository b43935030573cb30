from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from .auth import AuthService
from .config import CORS_ORIGINS, HOST, PORT, VERSION, configure_logging
from .db import get_db, init_db
from .errors import TaskboardError
from .models import Board, Card, TaskList, User
from .schemas import (
    BoardIn,
    BoardOut,
    CardIn,
    CardMove,
    CardOut,
    CardPatch,
    Credentials,
    ErrorEnvelope,
    Health,
    ListIn,
    ListOut,
    ListPatch,
    LoginOut,
    UserOut,
    Version,
)
from .services import UNSET, BoardService, CardService, ListService

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("database ready")
    yield


app = FastAPI(title="Taskboard API", version=VERSION, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TaskboardError)
async def handle_taskboard_error(request: Request, exc: TaskboardError) -> JSONResponse:
    body = ErrorEnvelope(
        code=exc.code,
        message=exc.message,
        details=exc.details,
        requestId=str(uuid.uuid4()),
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


# === Helpers ===


def board_out(board: Board) -> BoardOut:
    return BoardOut(id=board.id, name=board.name)


def card_out(card: Card) -> CardOut:
    return CardOut(
        id=card.id,
        title=card.title,
        description=card.description,
        position=card.position,
        dueDate=card.due_date,
        labels=list(card.labels),
    )


def list_out(task_list: TaskList) -> ListOut:
    return ListOut(
        id=task_list.id,
        title=task_list.title,
        position=task_list.position,
        cards=[card_out(c) for c in task_list.cards],
    )


def user_out(user: User) -> UserOut:
    return UserOut(id=user.id, username=user.username)


def get_board_service(db: Session = Depends(get_db)) -> BoardService:
    return BoardService(db)


def get_list_service(db: Session = Depends(get_db)) -> ListService:
    return ListService(db)


def get_card_service(db: Session = Depends(get_db)) -> CardService:
    return CardService(db)


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(db)


# === Health & metadata ===


@app.get("/health", response_model=Health)
def health():
    return Health()


@app.get("/version", response_model=Version)
def version():
    return Version(version=VERSION)


# === Auth endpoints ===


@app.post("/auth/register", response_model=UserOut)
def register(payload: Credentials, auth: AuthService = Depends(get_auth_service)):
    return user_out(auth.register(payload.username, payload.password))


@app.post("/auth/login", response_model=LoginOut)
def login(payload: Credentials, auth: AuthService = Depends(get_auth_service)):
    user = auth.login(payload.username, payload.password)
    return LoginOut(message=f"Login successful for: {user.username}", username=user.username)


# === Board endpoints ===


@app.get("/boards", response_model=list[BoardOut])
def list_boards(boards: BoardService = Depends(get_board_service)):
    return [board_out(b) for b in boards.list_all()]


@app.post("/boards", response_model=BoardOut)
def create_board(payload: BoardIn, boards: BoardService = Depends(get_board_service)):
    return board_out(boards.create(payload.name))


@app.put("/boards/{board_id}", response_model=BoardOut)
def update_board(board_id: int, payload: BoardIn, boards: BoardService = Depends(get_board_service)):
    return board_out(boards.update(board_id, payload.name))


@app.delete("/boards/{board_id}", status_code=204)
def delete_board(board_id: int, boards: BoardService = Depends(get_board_service)):
    boards.delete(board_id)
    return Response(status_code=204)


# === List endpoints ===


@app.get("/boards/{board_id}/lists", response_model=list[ListOut])
def list_lists(board_id: int, lists: ListService = Depends(get_list_service)):
    return [list_out(tl) for tl in lists.list_by_board(board_id)]


@app.post("/boards/{board_id}/lists", response_model=ListOut)
def create_list(board_id: int, payload: ListIn, lists: ListService = Depends(get_list_service)):
    return list_out(lists.create(board_id, payload.title, payload.position))


@app.put("/lists/{list_id}", response_model=ListOut)
def update_list(list_id: int, payload: ListPatch, lists: ListService = Depends(get_list_service)):
    return list_out(lists.update(list_id, payload.title, payload.position))


@app.delete("/lists/{list_id}", status_code=204)
def delete_list(list_id: int, lists: ListService = Depends(get_list_service)):
    lists.delete(list_id)
    return Response(status_code=204)


# === Card endpoints ===


@app.get("/lists/{list_id}/cards", response_model=list[CardOut])
def list_cards(list_id: int, cards: CardService = Depends(get_card_service)):
    return [card_out(c) for c in cards.list_by_list(list_id)]


@app.post("/lists/{list_id}/cards", response_model=CardOut)
def create_card(list_id: int, payload: CardIn, cards: CardService = Depends(get_card_service)):
    card = cards.create(
        list_id,
        payload.title,
        payload.description,
        payload.position,
        payload.dueDate,
        payload.labels,
    )
    return card_out(card)


@app.put("/cards/{card_id}", response_model=CardOut)
def update_card(card_id: int, payload: CardPatch, cards: CardService = Depends(get_card_service)):
    card = cards.update(
        card_id,
        title=payload.title,
        description=payload.description,
        position=payload.position,
        due_date=payload.dueDate,
        labels=payload.labels,
    )
    return card_out(card)


@app.put("/cards/{card_id}/move", response_model=CardOut)
def move_card(card_id: int, payload: CardMove, cards: CardService = Depends(get_card_service)):
    # a position key sent as null differs from one left out
    position = payload.position if "position" in payload.model_fields_set else UNSET
    return card_out(cards.move(card_id, payload.newListId, position))


@app.delete("/cards/{card_id}", status_code=204)
def delete_card(card_id: int, cards: CardService = Depends(get_card_service)):
    cards.delete(card_id)
    return Response(status_code=204)


def run() -> None:
    uvicorn.run("taskboard.main:app", host=HOST, port=PORT)
