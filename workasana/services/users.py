import logging
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..models import User
from ..schemas.user import UserCreate
from ..utils.security import TokenService, get_password_hash, verify_password
from .entities import EntityDescriptor

logger = logging.getLogger(__name__)

USERS = EntityDescriptor(name="user", collection="users", model=User)


def create_user(db: Session, user_in: UserCreate) -> Optional[User]:
    """Register a user; None when the email is already taken."""
    existing = db.query(User).filter(func.lower(User.email) == user_in.email.lower()).first()
    if existing:
        logger.info(f"Signup rejected, email already registered: {user_in.email}")
        return None

    user = User(
        name=user_in.name,
        email=user_in.email,
        hashed_password=get_password_hash(user_in.password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race with a concurrent signup for the same email
        db.rollback()
        logger.info(f"Signup rejected on unique constraint: {user_in.email}")
        return None
    db.refresh(user)
    return user


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    user = db.query(User).filter(func.lower(User.email) == email.strip().lower()).first()
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user


def login_user(db: Session, tokens: TokenService, email: str, password: str) -> Optional[str]:
    """Return a bearer token for valid credentials, None otherwise."""
    user = authenticate_user(db, email, password)
    if not user:
        logger.warning(f"Failed login for {email}")
        return None
    return tokens.create_access_token(user.id)


def read_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)
