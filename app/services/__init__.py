from app.services.registration import parse_submission, register_user
from app.services.uploads import FileIntake, IncomingFile, LocalFileIntake
from app.services.user_store import SqlUserStore, UserStore

__all__ = [
    "FileIntake",
    "IncomingFile",
    "LocalFileIntake",
    "SqlUserStore",
    "UserStore",
    "parse_submission",
    "register_user",
]
