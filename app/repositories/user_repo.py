# app/repositories/user_repo.py
from sqlmodel import Session, select

from app.models.user import User
from app.repositories.sql_utils import insert_if_absent


class UserRepository:
    """
    Data access layer for User.

    Responsibilities:
      - Pure DB operations (CRUD + queries)
      - No FastAPI, no HTTP, no business logic
    """

    def get_by_id(self, session: Session, user_id: int) -> User | None:
        """Return a User by primary key, or None if not found."""
        return session.get(User, user_id)

    def get_by_email(self, session: Session, email: str) -> User | None:
        """Return a User by unique email, or None if not found."""
        stmt = select(User).where(User.email == email)
        return session.exec(stmt).first()

    def upsert_by_email(self, session: Session, email: str, name: str | None) -> tuple[User, bool]:
        """
        Insert a User unless one with this email already exists.

        Existing rows are left untouched. Safe under concurrent callbacks
        for the same new user: the unique index on email decides the winner.

        Returns:
            (user, created)
        """
        created = insert_if_absent(
            session,
            User,
            User(email=email, name=name).model_dump(exclude_none=True),
            conflict_columns=["email"],
        )
        return self.get_by_email(session, email), created
