from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from marquee.database import get_db
from marquee.schemas.auth import (
    UserRegister,
    UserLogin,
    UserResponse,
    TokenResponse,
)
from marquee.services.auth_service import AuthService
from marquee.utils.dependencies import get_current_user
from marquee.models.user import User

# Define router
router = APIRouter(prefix="/api/auth", tags=["Authentication"])


# Register a new user
@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserRegister, db: Session = Depends(get_db)):
    """Register a new user with an optional display nickname"""
    return AuthService.register_user(db, user_data)


# Login endpoint
@router.post("/login", response_model=TokenResponse)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Login with email and password"""
    return AuthService.login_user(db, credentials)


# Get current authenticated user
@router.get("/me", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)):
    """Get current authenticated user"""
    return current_user
