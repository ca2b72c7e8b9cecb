from fastapi import APIRouter
from fastapi.responses import PlainTextResponse  # still used for /healthz

from spendwise.responses import envelope

router = APIRouter()  # group of routes


@router.get("/healthz", response_class=PlainTextResponse)  # tiny health check
def healthz():
    return "ok"


@router.get("/")  # home route
def home():
    return envelope(message="Welcome to the SpendWise API!")
