import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from banditcore.param.backend import BaseStateBackend
from banditcore.param.state import PolicyState
from banditlog import get_logger

from banditstore.errors import PersistenceError
from banditstore.snapshot import PolicySnapshot

logger = get_logger(__name__)


class FileStateBackend(BaseStateBackend):
    """policy state as a json document on local disk."""

    def __init__(self, path: str | os.PathLike):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> PolicyState | None:
        try:
            data = self._path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise PersistenceError(f"cannot read {self._path}: {e}") from e

        try:
            snapshot = PolicySnapshot.model_validate_json(data)
        except ValidationError as e:
            raise PersistenceError(f"corrupt policy state in {self._path}: {e}") from e

        logger.debug("loaded %d contexts from %s", len(snapshot.contexts), self._path)
        return snapshot.to_state()

    def save(self, state: PolicyState) -> None:
        payload = PolicySnapshot.from_state(state).model_dump_json()
        directory = self._path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            # write next to the target and rename so readers never see a partial file
            fd, tmp = tempfile.mkstemp(dir=directory, prefix=f".{self._path.name}.")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                os.replace(tmp, self._path)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise PersistenceError(f"cannot write {self._path}: {e}") from e
