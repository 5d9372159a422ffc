"""File intake: store uploaded bytes, return a storage path."""
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from fastapi import Request, UploadFile
from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)


@dataclass
class IncomingFile:
    filename: str
    content: bytes


class FileIntake(Protocol):
    async def store(self, upload: IncomingFile) -> str: ...

    async def discard(self, reference: str) -> None: ...


class LocalFileIntake:
    """Writes uploads into one directory as <epoch-millis>-<original name>."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _target(self, filename: str) -> Path:
        # basename only: never let a client pick the directory
        safe_name = Path(filename).name or "upload"
        return self.directory / f"{int(time.time() * 1000)}-{safe_name}"

    def _write(self, target: Path, content: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)

    async def store(self, upload: IncomingFile) -> str:
        target = self._target(upload.filename)
        await run_in_threadpool(self._write, target, upload.content)
        logger.info("Stored upload %s (%s bytes)", target, len(upload.content))
        return str(target)

    async def discard(self, reference: str) -> None:
        """Remove a file written by store() whose user was never saved."""
        await run_in_threadpool(Path(reference).unlink, missing_ok=True)
        logger.info("Discarded upload %s", reference)


async def read_upload(file: UploadFile | None) -> IncomingFile | None:
    """Read a submitted file; a file part with no filename means nothing was chosen."""
    if file is None or not file.filename:
        return None
    content = await file.read()
    return IncomingFile(filename=file.filename, content=content)


def get_file_intake(request: Request) -> FileIntake:
    return LocalFileIntake(request.app.state.settings.upload_dir)
