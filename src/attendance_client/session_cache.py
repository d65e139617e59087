"""
File-backed session cache for the device client.

The logged-in teacher record and its session token are stored together
in a single JSON document, so a reader can never observe a token without
its teacher or a teacher without its token.

Storage layout::

    {
        "teacher": {"id": 1, "name": "...", "email": "...", ...},
        "token": "<session token>",
        "savedAt": "2026-01-01T00:00:00+00:00"
    }

Writes go to a temporary file in the same directory which then replaces
the document, and the file is readable by its owner only.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from attendance_client.exceptions import SessionCacheError

logger = logging.getLogger(__name__)

_FILE_MODE = 0o600


@dataclass(frozen=True)
class CachedSession:
    """A teacher record together with the token issued for it."""

    teacher: dict[str, Any]
    token: str
    saved_at: datetime

    @property
    def teacher_id(self) -> int | None:
        return self.teacher.get("id")


class SessionCache:
    """Persist one teacher session on the local device.

    Each instance guards its document with an ``RLock``; pass a single
    ``SessionCache`` to every component that needs the session.

    Parameters
    ----------
    path:
        Location of the JSON document. Parent directories are created on
        first save.
    """

    def __init__(self, path: Path | str) -> None:
        self._path: Path = Path(path)
        self._lock: threading.RLock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._path

    def save(self, teacher: dict[str, Any], token: str) -> CachedSession:
        """Store *teacher* and *token*, replacing any previous session.

        Raises
        ------
        SessionCacheError
            If the document could not be written. The previous session,
            if any, is left untouched.
        """
        if not token:
            msg = "Cannot cache a session without a token"
            raise ValueError(msg)

        session = CachedSession(
            teacher=dict(teacher),
            token=token,
            saved_at=datetime.now(tz=timezone.utc),
        )
        document = {
            "teacher": session.teacher,
            "token": session.token,
            "savedAt": session.saved_at.isoformat(),
        }

        with self._lock:
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._write_atomically(json.dumps(document, ensure_ascii=False))
            except OSError as e:
                msg = "Could not save the session"
                raise SessionCacheError(msg) from e

        logger.debug("Session cached for teacher %s", session.teacher_id)
        return session

    def load(self) -> CachedSession | None:
        """Return the cached session, or ``None`` if there is none.

        A document that cannot be read, or lacks either the teacher or the
        token, is treated as empty and removed.
        """
        with self._lock:
            try:
                raw = self._path.read_text(encoding="utf-8")
            except FileNotFoundError:
                return None
            except OSError as e:
                logger.warning("Could not read session cache %s: %s", self._path, e)
                return None

            session = self._parse(raw)
            if session is None:
                logger.warning("Discarding incomplete session cache %s", self._path)
                self._discard()
            return session

    def clear(self) -> None:
        """Remove the cached session. Succeeds if there is none.

        Raises
        ------
        SessionCacheError
            If the document exists but could not be removed.
        """
        with self._lock:
            try:
                self._path.unlink(missing_ok=True)
            except OSError as e:
                msg = "Could not clear the session"
                raise SessionCacheError(msg) from e

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _write_atomically(self, content: str) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent,
            prefix=f".{self._path.name}.",
            suffix=".tmp",
        )
        try:
            os.chmod(tmp_name, _FILE_MODE)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(content)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _discard(self) -> None:
        try:
            self._path.unlink(missing_ok=True)
        except OSError:
            logger.exception("Could not remove session cache %s", self._path)

    @staticmethod
    def _parse(raw: str) -> CachedSession | None:
        try:
            document = json.loads(raw)
        except ValueError:
            return None
        if not isinstance(document, dict):
            return None

        teacher = document.get("teacher")
        token = document.get("token")
        if not isinstance(teacher, dict) or not teacher:
            return None
        if not isinstance(token, str) or not token:
            return None

        saved_at_raw = document.get("savedAt")
        try:
            saved_at = datetime.fromisoformat(saved_at_raw)
        except (TypeError, ValueError):
            saved_at = datetime.now(tz=timezone.utc)

        return CachedSession(teacher=teacher, token=token, saved_at=saved_at)
