import asyncio

import pytest

from app.core.errors import InvalidRegistrationError, UserExistsError
from app.core.security import verify_password
from app.schemas.registration import RegistrationForm
from app.services.registration import parse_submission, register_user
from app.services.uploads import IncomingFile


class FakeUserStore:
    def __init__(self):
        self.users = {}

    async def find_by_email(self, email):
        return self.users.get(email)

    async def add(self, user):
        user.id = len(self.users) + 1
        self.users[user.email] = user
        return user


class FakeIntake:
    def __init__(self):
        self.stored = []
        self.discarded = []

    async def store(self, upload):
        self.stored.append(upload)
        return f"uploads/123-{upload.filename}"

    async def discard(self, reference):
        self.discarded.append(reference)


class RacingUserStore(FakeUserStore):
    """Lookup misses, insert hits the unique email."""

    async def add(self, user):
        raise UserExistsError(user.email)


def _fields(**overrides):
    fields = {
        "name": "Ann",
        "email": "ann@x.com",
        "password": "secret1",
        "gender": "F",
        "age": "30",
        "terms_and_conditions": "on",
    }
    fields.update(overrides)
    return fields


def test_parse_submission_builds_form():
    form = parse_submission(**_fields(email=" Ann@X.com", bio="", referrer="ad"))

    assert isinstance(form, RegistrationForm)
    assert form.email == "ann@x.com"
    assert form.age == 30
    assert form.bio is None
    assert form.referrer == "ad"
    assert form.terms_accepted is True


def test_parse_submission_reports_field_names_only():
    with pytest.raises(InvalidRegistrationError) as exc_info:
        parse_submission(**_fields(name=None, age="abc"))

    assert exc_info.value.fields == ["age", "name"]
    assert exc_info.value.status_code == 400
    assert exc_info.value.error_code is None
    assert "secret1" not in str(exc_info.value)


@pytest.mark.parametrize("terms", [None, "", "true", "off"])
def test_parse_submission_requires_terms_on(terms):
    with pytest.raises(InvalidRegistrationError) as exc_info:
        parse_submission(**_fields(terms_and_conditions=terms))

    assert exc_info.value.fields == ["terms_accepted"]


@pytest.mark.parametrize("age", ["abc", "nan", "inf"])
def test_parse_submission_rejects_non_numeric_age(age):
    with pytest.raises(InvalidRegistrationError) as exc_info:
        parse_submission(**_fields(age=age))

    assert exc_info.value.fields == ["age"]


def test_parse_submission_accepts_what_the_form_allows():
    form = parse_submission(**_fields(email="ann@localhost", age="30.5", password="p" * 80))

    assert form.email == "ann@localhost"
    assert form.age == 30.5
    assert form.password == "p" * 80


def test_register_user_without_file():
    store, intake = FakeUserStore(), FakeIntake()
    form = parse_submission(**_fields())

    user = asyncio.run(register_user(form, store, intake))

    assert user.id == 1
    assert user.profile_picture is None
    assert intake.stored == []
    assert user.hashed_password != "secret1"
    assert verify_password("secret1", user.hashed_password)
    assert len(store.users) == 1


def test_register_user_with_file():
    store, intake = FakeUserStore(), FakeIntake()
    form = parse_submission(**_fields())
    upload = IncomingFile(filename="me.jpg", content=b"jpeg")

    user = asyncio.run(register_user(form, store, intake, upload))

    assert intake.stored == [upload]
    assert user.profile_picture == "uploads/123-me.jpg"


def test_register_user_duplicate_email():
    store, intake = FakeUserStore(), FakeIntake()
    form = parse_submission(**_fields())
    asyncio.run(register_user(form, store, intake))

    with pytest.raises(UserExistsError) as exc_info:
        asyncio.run(register_user(form, store, intake, IncomingFile("me.jpg", b"jpeg")))

    assert exc_info.value.status_code == 409
    assert exc_info.value.error_code == "userexists"
    assert intake.stored == []
    assert len(store.users) == 1


def test_failed_insert_discards_stored_file():
    store, intake = RacingUserStore(), FakeIntake()
    form = parse_submission(**_fields())

    with pytest.raises(UserExistsError):
        asyncio.run(register_user(form, store, intake, IncomingFile("me.jpg", b"jpeg")))

    assert intake.discarded == ["uploads/123-me.jpg"]


def test_failed_insert_without_file_discards_nothing():
    store, intake = RacingUserStore(), FakeIntake()

    with pytest.raises(UserExistsError):
        asyncio.run(register_user(parse_submission(**_fields()), store, intake))

    assert intake.discarded == []
