from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from werkzeug.security import check_password_hash, generate_password_hash

from .errors import Conflict, Unauthorized
from .models import User
from .storage import Repository

logger = logging.getLogger(__name__)


class AuthService:
    """Username/password registration and login.

    Passwords are kept only as salted hashes, never as sent.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.users = Repository(session, User)

    def register(self, username: str, password: str) -> User:
        if self.users.find_one_by(User.username, username) is not None:
            logger.warning("registration refused, username %r taken", username)
            raise Conflict("username already taken", {"username": username})
        user = User(username=username, password_hash=generate_password_hash(password))
        try:
            user = self.users.save(user)
        except IntegrityError:
            # lost a race with a concurrent registration of the same name
            self.session.rollback()
            logger.warning("registration refused, username %r taken", username)
            raise Conflict("username already taken", {"username": username})
        logger.info("registered user %s", user.id)
        return user

    def login(self, username: str, password: str) -> User:
        user = self.users.find_one_by(User.username, username)
        if user is None or not check_password_hash(user.password_hash, password):
            logger.warning("failed login for %r", username)
            raise Unauthorized("invalid username or password")
        return user
