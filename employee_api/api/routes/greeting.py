"""
Greeting API endpoint.

Provides a single static greeting under the versioned API prefix.
"""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

GREETING = "welcome to Spring Boot Application"

router = APIRouter(prefix="/api/v1", tags=["greeting"])


@router.get(
    "/greeting",
    response_class=PlainTextResponse,
    summary="Static greeting.",
    responses={
        200: {
            "description": "The greeting text.",
            "content": {"text/plain": {"example": GREETING}},
        },
    },
)
def greeting() -> str:
    return GREETING
