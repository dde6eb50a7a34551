"""Router serving the static signup form."""

from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

FORM_TEMPLATE = Path(__file__).resolve().parents[3] / "templates" / "index.html"

router = APIRouter(tags=["form"])


@lru_cache(maxsize=1)
def load_form_page() -> str:
    return FORM_TEMPLATE.read_text(encoding="utf-8")


@router.get("/", response_class=HTMLResponse)
def form_page() -> HTMLResponse:
    """Return the signup form. The page is fixed; nothing is computed per request."""
    return HTMLResponse(load_form_page())
