"""
Storage backends for the single user record.

The credential service never opens files itself.  It is handed a
``UserStore`` whose only capability is ``load()``, returning a fresh
``UserRecord`` on every call.  ``JsonFileUserStore`` reads the record
from a JSON file on disk; ``InMemoryUserStore`` holds it in memory and
is used by the tests.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from ..schemas.user import UserRecord
from .exceptions import StorageUnavailable

logger = logging.getLogger(__name__)


def resolve_user_data_path(path: str) -> str:
    """Compute the path to the user record file.

    Absolute paths are returned as is.  Relative paths are resolved
    against the project root, the directory containing the
    ``credential_api`` package.
    """
    if os.path.isabs(path):
        return path
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / path).resolve())


class UserStore(ABC):
    """Read-only source of the user record."""

    location = "<unknown>"

    @abstractmethod
    def load(self) -> UserRecord:
        """Return a fresh copy of the stored record.

        Raises ``StorageUnavailable`` if the record cannot be produced.
        """


def _parse_record(data: Any, location: str) -> UserRecord:
    try:
        return UserRecord.model_validate(data)
    except ValidationError as e:
        raise StorageUnavailable(location, f"malformed user record ({e.error_count()} errors)") from e


class JsonFileUserStore(UserStore):
    """User record stored as a JSON object in a file.

    The file is read on every ``load()``; nothing is cached, so edits
    made by an external process are picked up by the next request.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self.location = str(self.path)

    def load(self) -> UserRecord:
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError as e:
            logger.error("User record file %s does not exist", self.path)
            raise StorageUnavailable(self.location, "file not found") from e
        except json.JSONDecodeError as e:
            logger.error("User record file %s is not valid JSON: %s", self.path, e)
            raise StorageUnavailable(self.location, "invalid JSON") from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read user record file %s: %s", self.path, e)
            raise StorageUnavailable(self.location, str(e)) from e
        return _parse_record(data, self.location)


class InMemoryUserStore(UserStore):
    """User record held in memory.

    ``record`` may be ``None`` to simulate an empty store, in which
    case ``load()`` raises ``StorageUnavailable``.
    """

    location = "<memory>"

    def __init__(self, record: Optional[Union[UserRecord, Dict[str, Any]]] = None) -> None:
        if isinstance(record, UserRecord):
            record = record.model_dump()
        self._data = dict(record) if record is not None else None
        self.loads = 0

    def load(self) -> UserRecord:
        self.loads += 1
        if self._data is None:
            raise StorageUnavailable(self.location, "no record stored")
        return _parse_record(dict(self._data), self.location)
