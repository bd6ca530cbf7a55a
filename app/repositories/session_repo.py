# app/repositories/session_repo.py
from datetime import datetime

from sqlalchemy import delete
from sqlmodel import Session

from app.models.session import AuthSession


class SessionRepository:
    """Storage for issued session tokens (keyed by token digest)."""

    def get(self, session: Session, session_id: str) -> AuthSession | None:
        return session.get(AuthSession, session_id)

    def create(self, session: Session, auth_session: AuthSession) -> AuthSession:
        session.add(auth_session)
        session.commit()
        session.refresh(auth_session)
        return auth_session

    def delete(self, session: Session, session_id: str) -> int:
        result = session.exec(delete(AuthSession).where(AuthSession.session_id == session_id))
        session.commit()
        return result.rowcount

    def delete_expired_for_user(self, session: Session, user_id: int, now: datetime) -> int:
        stmt = delete(AuthSession).where(
            AuthSession.user_id == user_id,
            AuthSession.expires_at <= now,
        )
        result = session.exec(stmt)
        session.commit()
        return result.rowcount
