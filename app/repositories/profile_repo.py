# app/repositories/profile_repo.py
from sqlalchemy import delete, update
from sqlmodel import Session, select

from app.models.favorite import Favorite
from app.models.profile import Profile


class ProfileRepository:

    def get_by_id(self, session: Session, profile_id: int) -> Profile | None:
        return session.get(Profile, profile_id)

    def list_by_user(self, session: Session, user_id: int) -> list[Profile]:
        stmt = select(Profile).where(Profile.user_id == user_id).order_by(Profile.profile_id)
        return list(session.exec(stmt).all())

    def create(self, session: Session, profile: Profile) -> Profile:
        session.add(profile)
        session.commit()
        session.refresh(profile)
        return profile

    def update_name(self, session: Session, profile_id: int, profile_name: str) -> Profile | None:
        """Rename a profile in one UPDATE. Returns None if no row matched."""
        stmt = (
            update(Profile)
            .where(Profile.profile_id == profile_id)
            .values(profile_name=profile_name)
        )
        result = session.exec(stmt)
        session.commit()
        if result.rowcount == 0:
            return None
        return session.get(Profile, profile_id)

    def delete(self, session: Session, profile_id: int) -> int:
        """
        Delete a profile together with its favorites.

        Returns the number of profile rows removed (0 or 1).
        """
        session.exec(delete(Favorite).where(Favorite.profile_id == profile_id))
        result = session.exec(delete(Profile).where(Profile.profile_id == profile_id))
        session.commit()
        return result.rowcount
