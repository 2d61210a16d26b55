import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..core.auth import CurrentUser, get_current_user, get_token_service
from ..core.database import get_db
from ..core.exceptions import NotFound, Unauthorized, ValidationError
from ..schemas.user import Token, UserCreate, UserLogin, UserOut
from ..services import users
from ..utils.security import TokenService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def signup(user_in: UserCreate, db: Session = Depends(get_db)):
    user = users.create_user(db, user_in)
    if not user:
        raise ValidationError("Email already registered")
    logger.info(f"Registered user {user.id}")
    return user


@router.post("/login", response_model=Token)
def login(
    credentials: UserLogin,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service)
):
    token = users.login_user(db, tokens, credentials.email, credentials.password)
    if not token:
        raise Unauthorized("Invalid Credentials")
    return Token(token=token)


@router.get("/me", response_model=UserOut)
def read_me(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    user = users.read_user_by_id(db, current_user.user_id)
    if not user:
        raise NotFound("User not found")
    return user
