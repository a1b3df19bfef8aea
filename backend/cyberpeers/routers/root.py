"""
Root router.
"""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Root"])


@router.get("/", response_class=PlainTextResponse)
async def root():
    return "Cyberpeers Server is running"
