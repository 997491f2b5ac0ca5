"""
Tuiter Backend — Smoke-Test Routes
====================================

    GET /hello        → "Hello World!"
    GET /add/{a}/{b}  → a and b concatenated ("/add/1/2" answers "12")

Path segments are strings, so /add joins them rather than summing.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Smoke"])


@router.get("/hello", response_class=PlainTextResponse)
async def hello() -> str:
    return "Hello World!"


@router.get("/add/{a}/{b}", response_class=PlainTextResponse)
async def add(a: str, b: str) -> str:
    return a + b
