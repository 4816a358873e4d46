from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from supabase import Client
from supabase_auth.errors import AuthApiError
from supabase_auth.types import UserResponse

from app.services.supabase_client import get_supabase_client

# Tokens are issued by Supabase Auth on the frontend; we only validate them here.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/token")


def get_current_user(
    token: str = Depends(oauth2_scheme),
    supabase: Client = Depends(get_supabase_client),
) -> UserResponse:
    """
    FastAPI dependency: resolve the 'Authorization: Bearer <token>' header to
    a Supabase user, or fail the request with 401.
    """
    try:
        user = supabase.auth.get_user(token)
    except AuthApiError:
        user = None

    if not user or not user.user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
