from typing import Optional

from sqlalchemy.orm import Session

from campus_wellness.core.security import hash_password, verify_password
from campus_wellness.db.models.user import User
from campus_wellness.api.auth import schemas


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def create_user(db: Session, user_data: schemas.UserCreate) -> User:
    user = User(
        email=user_data.email,
        name=user_data.name,
        hashed_password=hash_password(user_data.password),
        auth_provider="local",
        campus=user_data.campus,
        office_or_dept=user_data.office_or_dept,
        is_profile_complete=bool(user_data.campus and user_data.office_or_dept),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user
