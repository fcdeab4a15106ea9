from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import logging
from app.database import get_db
from app.models.user import User
from app.schemas.user import UserCreate, UserLogin, TokenResponse
from app.auth.passwords import authenticate_user, find_user_by_email, hash_password, normalize_email
from app.auth.token import token_for_user

router = APIRouter(prefix="/auth", tags=["authentication"])
logger = logging.getLogger(__name__)

def _issue(user: User, message: str) -> TokenResponse:
    return TokenResponse(
        message=message,
        user_id=user.user_id,
        access_token=token_for_user(user),
        token_type="bearer",
    )

@router.post("/signup", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def signup(user: UserCreate, db: Session = Depends(get_db)):
    """Register an account and sign it in"""
    if find_user_by_email(db, user.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    db_user = User(email=normalize_email(user.email), password_hash=hash_password(user.password))
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        # Another signup took the address after the lookup above
        db.rollback()
        raise HTTPException(status_code=400, detail="Email already registered")
    db.refresh(db_user)

    logger.info(f"New user signed up: {db_user.email}")
    return _issue(db_user, "Signup successful.")

@router.post("/login", response_model=TokenResponse)
async def login(credentials: UserLogin, db: Session = Depends(get_db)):
    db_user = authenticate_user(db, credentials.email, credentials.password)
    if db_user is None:
        logger.info(f"Failed login for {credentials.email}")
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return _issue(db_user, "Login successful.")
