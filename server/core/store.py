# server/core/store.py

import os
import json
import logging
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from core.errors import StoreError, CorruptStoreError
from core.state import with_store_lock


logger = logging.getLogger(__name__)


class JsonStore:
    """
    A collection of records persisted as a single JSON array.

    Every mutation rewrites the whole file. Use `transaction()` for
    read-modify-write cycles so concurrent requests in this process
    do not lose each other's updates.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> list[dict]:
        if not self.path.exists():
            return []

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("Corrupt data file %s: %s", self.path, e)
            raise CorruptStoreError(f"Data file {self.path.name} is not valid UTF-8 JSON") from e
        except OSError as e:
            raise StoreError(f"Could not read {self.path.name}") from e

        if not isinstance(data, list):
            logger.error("Corrupt data file %s: expected a JSON array", self.path)
            raise CorruptStoreError(f"Data file {self.path.name} does not hold a list")
        return data

    def save(self, records: list[dict]) -> None:
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = Path(tmp.name)
                json.dump(records, tmp, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise StoreError(f"Could not write {self.path.name}") from e

    @contextmanager
    def transaction(self) -> Iterator[list[dict]]:
        """
        Locks the file, yields its records for in-place mutation and saves them on exit.
        Nothing is written if the block raises.
        """
        with with_store_lock(self.path):
            records = self.load()
            yield records
            self.save(records)
