"""Registration route: form post with optional profile picture."""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from fastapi.responses import RedirectResponse

from app.core.errors import SERVER_ERROR_CODE, RegistrationError
from app.services.registration import parse_submission, register_user
from app.services.uploads import FileIntake, get_file_intake, read_upload
from app.services.user_store import UserStore, get_user_store

logger = logging.getLogger(__name__)

router = APIRouter()


def _redirect_error(request: Request, error_code: str | None) -> RedirectResponse:
    url = request.url_for("error_get")
    if error_code:
        url = url.include_query_params(message=error_code)
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)


@router.post("/register", response_class=RedirectResponse)
async def register_post(
    request: Request,
    store: Annotated[UserStore, Depends(get_user_store)],
    intake: Annotated[FileIntake, Depends(get_file_intake)],
    name: Annotated[str | None, Form()] = None,
    email: Annotated[str | None, Form()] = None,
    password: Annotated[str | None, Form()] = None,
    gender: Annotated[str | None, Form()] = None,
    age: Annotated[str | None, Form()] = None,
    bio: Annotated[str | None, Form()] = None,
    referrer: Annotated[str | None, Form()] = None,
    terms_and_conditions: Annotated[str | None, Form(alias="terms-and-conditions")] = None,
    file: Annotated[UploadFile | None, File()] = None,
):
    """Validate, create the user, redirect to /success or /error."""
    try:
        form = parse_submission(
            name=name,
            email=email,
            password=password,
            gender=gender,
            age=age,
            bio=bio,
            referrer=referrer,
            terms_and_conditions=terms_and_conditions,
        )
        upload = await read_upload(file)
        await register_user(form, store, intake, upload)
    except RegistrationError as exc:
        logger.warning("Registration rejected (%s): %s", exc.status_code, exc)
        return _redirect_error(request, exc.error_code)
    except Exception:
        logger.exception("Registration failed")
        return _redirect_error(request, SERVER_ERROR_CODE)

    return RedirectResponse(request.url_for("success_get"), status_code=status.HTTP_302_FOUND)
