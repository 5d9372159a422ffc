"""Web routes: landing form, success and error pages. Jinja2 templates."""
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.core.config import APP_DIR

router = APIRouter()
templates = Jinja2Templates(directory=str(APP_DIR / "templates"))

ERROR_MESSAGES = {
    "userexists": "An account with this email already exists.",
    "servererror": "Something went wrong on our side. Please try again later.",
}
DEFAULT_ERROR_MESSAGE = "Please fill in all required fields and accept the terms and conditions."


@router.get("/", response_class=HTMLResponse)
async def home(request: Request):
    return templates.TemplateResponse(request, "index.html")


@router.get("/success", response_class=HTMLResponse)
async def success_get(request: Request):
    return templates.TemplateResponse(request, "success.html")


@router.get("/error", response_class=HTMLResponse)
async def error_get(request: Request, message: str | None = None):
    return templates.TemplateResponse(
        request,
        "error.html",
        {"message": ERROR_MESSAGES.get(message or "", DEFAULT_ERROR_MESSAGE)},
    )
