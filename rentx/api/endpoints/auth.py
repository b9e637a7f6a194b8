from fastapi import APIRouter, Depends, Form
from fastapi.responses import PlainTextResponse

from rentx.api.deps import get_identity_service
from rentx.services.identity_service import IdentityService

router = APIRouter()

@router.post("/signup", response_class=PlainTextResponse)
def signup(
    name: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
    identity: IdentityService = Depends(get_identity_service)
) -> str:
    """
    Register a new user.

    A duplicate email fails with 500 and the store's message.
    """
    identity.register(name, email, password)
    return "Signup successful\n"

@router.post("/signin", response_class=PlainTextResponse)
def signin(
    email: str = Form(""),
    password: str = Form(""),
    identity: IdentityService = Depends(get_identity_service)
) -> str:
    """
    Check credentials and return the user id.

    Any mismatch answers 401 "Invalid credentials" without saying which field was wrong.
    """
    user_id = identity.authenticate(email, password)
    return f"Login successful. UserID: {user_id}"
