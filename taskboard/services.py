from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from .errors import BadRequest, NotFound
from .models import Board, Card, TaskList
from .storage import Repository

logger = logging.getLogger(__name__)

# Marks an argument the caller did not send at all, as opposed to an explicit None.
UNSET: Any = object()


class BoardService:
    def __init__(self, session: Session) -> None:
        self.boards = Repository(session, Board)

    def list_all(self) -> List[Board]:
        return self.boards.list_all()

    def create(self, name: Optional[str]) -> Board:
        board = self.boards.save(Board(name=name))
        logger.info("created board %s", board.id)
        return board

    def update(self, board_id: int, name: Optional[str]) -> Board:
        board = self.boards.get(board_id)
        if board is None:
            raise NotFound("board not found", {"boardId": board_id})
        # name is replaced as sent, None included
        board.name = name
        return self.boards.save(board)

    def delete(self, board_id: int) -> None:
        self.boards.delete_by_id(board_id)
        logger.info("deleted board %s", board_id)


class ListService:
    def __init__(self, session: Session) -> None:
        self.boards = Repository(session, Board)
        self.lists = Repository(session, TaskList)

    def list_by_board(self, board_id: int) -> List[TaskList]:
        return self.lists.list_by(TaskList.board_id, board_id, order_by=(TaskList.position,))

    def create(self, board_id: int, title: Optional[str], position: Optional[int] = None) -> TaskList:
        board = self.boards.get(board_id)
        if board is None:
            raise NotFound("board not found", {"boardId": board_id})
        task_list = TaskList(
            title=title,
            position=position if position is not None else 0,
            board=board,
        )
        task_list = self.lists.save(task_list)
        logger.info("created list %s on board %s", task_list.id, board_id)
        return task_list

    def update(
        self,
        list_id: int,
        title: Optional[str] = None,
        position: Optional[int] = None,
    ) -> TaskList:
        task_list = self.lists.get(list_id)
        if task_list is None:
            raise NotFound("list not found", {"listId": list_id})
        if title is not None:
            task_list.title = title
        if position is not None:
            task_list.position = position
        return self.lists.save(task_list)

    def delete(self, list_id: int) -> None:
        self.lists.delete_by_id(list_id)
        logger.info("deleted list %s", list_id)


class CardService:
    def __init__(self, session: Session) -> None:
        self.lists = Repository(session, TaskList)
        self.cards = Repository(session, Card)

    def list_by_list(self, list_id: int) -> List[Card]:
        return self.cards.list_by(Card.list_id, list_id, order_by=(Card.position,))

    def create(
        self,
        list_id: int,
        title: Optional[str],
        description: Optional[str] = None,
        position: Optional[int] = None,
        due_date: Optional[datetime] = None,
        labels: Optional[List[str]] = None,
    ) -> Card:
        task_list = self.lists.get(list_id)
        if task_list is None:
            raise NotFound("list not found", {"listId": list_id})
        card = Card(
            title=title,
            description=description,
            position=position if position is not None else 0,
            due_date=due_date,
            task_list=task_list,
        )
        card.labels = list(labels or [])
        card = self.cards.save(card)
        logger.info("created card %s in list %s", card.id, list_id)
        return card

    def update(
        self,
        card_id: int,
        title: Optional[str] = None,
        description: Optional[str] = None,
        position: Optional[int] = None,
        due_date: Optional[datetime] = None,
        labels: Optional[List[str]] = None,
    ) -> Card:
        card = self.cards.get(card_id)
        if card is None:
            raise NotFound("card not found", {"cardId": card_id})
        if title is not None:
            card.title = title
        if description is not None:
            card.description = description
        if position is not None:
            card.position = position
        if due_date is not None:
            card.due_date = due_date
        if labels is not None:
            card.labels = list(labels)
        return self.cards.save(card)

    def move(self, card_id: int, new_list_id: Optional[int], position: Any = UNSET) -> Card:
        """Re-parent a card onto another list.

        ``position`` left as ``UNSET`` keeps the card's current position. An
        explicit ``None`` is refused, since the request then carried a position
        key without a usable value.
        """
        if new_list_id is None:
            raise BadRequest("newListId is required")
        card = self.cards.get(card_id)
        if card is None:
            raise NotFound("card not found", {"cardId": card_id})
        target = self.lists.get(new_list_id)
        if target is None:
            raise NotFound("target list not found", {"listId": new_list_id})
        if position is not UNSET and position is None:
            raise BadRequest("position must be an integer when present")

        old_list_id = card.list_id
        card.task_list = target
        if position is not UNSET:
            card.position = position
        card = self.cards.save(card)
        logger.info("moved card %s from list %s to list %s", card_id, old_list_id, new_list_id)
        return card

    def delete(self, card_id: int) -> None:
        self.cards.delete_by_id(card_id)
        logger.info("deleted card %s", card_id)
