"""Registration write path: validate, reject duplicates, hash, store file, insert.

Steps run sequentially inside one request. The lookup by email catches the
common duplicate; two concurrent submissions for the same email can both
pass it, in which case the unique index rejects the second insert and the
store raises UserExistsError just the same. A file stored for a user that
fails to insert is discarded again.
"""
import logging

from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from app.core.errors import InvalidRegistrationError, UserExistsError
from app.core.security import hash_password
from app.models.user import User
from app.schemas.registration import RegistrationForm
from app.services.uploads import FileIntake, IncomingFile
from app.services.user_store import UserStore

logger = logging.getLogger(__name__)


def parse_submission(**fields) -> RegistrationForm:
    """Validate raw form fields or raise InvalidRegistrationError."""
    try:
        return RegistrationForm.from_form(**fields)
    except ValidationError as exc:
        # field names only: error details echo the submitted input
        names = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
        raise InvalidRegistrationError(names) from None


async def register_user(
    form: RegistrationForm,
    store: UserStore,
    intake: FileIntake,
    upload: IncomingFile | None = None,
) -> User:
    if await store.find_by_email(form.email) is not None:
        raise UserExistsError(form.email)

    # bcrypt is CPU bound
    hashed = await run_in_threadpool(hash_password, form.password)

    profile_picture = None
    if upload is not None:
        profile_picture = await intake.store(upload)

    user = User(
        name=form.name,
        email=form.email,
        hashed_password=hashed,
        gender=form.gender,
        age=form.age,
        bio=form.bio,
        profile_picture=profile_picture,
        referrer=form.referrer,
        terms_accepted=form.terms_accepted,
    )
    try:
        user = await store.add(user)
    except Exception:
        if profile_picture is not None:
            await intake.discard(profile_picture)
        raise
    logger.info("Registered user id=%s email=%s", user.id, user.email)
    return user
