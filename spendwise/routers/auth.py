# spendwise/routers/auth.py
# Register / sign-in / sign-out / me. The credential is the signed session
# cookie; sign-out only clears it on the client.

from fastapi import APIRouter, Depends, Request, status
from sqlmodel import Session

from spendwise.db import get_session
from spendwise.responses import envelope
from spendwise.schemas import RegisterIn, SignInIn
from spendwise.security import issue_credential, require_user_id, revoke_credential
from spendwise.services.users import authenticate, get_user, public_profile, register_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me")
def me(
    user_id: str = Depends(require_user_id),
    session: Session = Depends(get_session),
):
    user = get_user(session, user_id)
    return envelope(public_profile(user))


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    data: RegisterIn,
    request: Request,
    session: Session = Depends(get_session),
):
    user = register_user(session, data)
    issue_credential(request, user.id)
    return envelope(public_profile(user), "Registered successfully!")


@router.post("/sign-in")
def sign_in(
    data: SignInIn,
    request: Request,
    session: Session = Depends(get_session),
):
    user = authenticate(session, data)
    issue_credential(request, user.id)
    return envelope(public_profile(user), "Signed in successfully!")


@router.post("/sign-out")
def sign_out(request: Request):
    revoke_credential(request)
    return envelope(message="Signed out successfully!")
