"""
YAML File Object Store Implementation.

Extends the in-memory store with write-through to a single YAML document.
The file is rewritten after every insert, delete and save using a temp file
and `os.replace`, so it is either the old or the new state, never partial.
A failed write also undoes the in-memory insert or delete before the
error propagates.

File layout:
    version: 1
    ExerciseCategory: [{id, name}, ...]
    Exercise: [{id, name, category_ids, measurements}, ...]
    Workout: [{id, name, exercises: [...], duration, progressive_overload}, ...]
    UserPreferences: [{id, body_weight, preferred_unit_system}]
"""
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Type, Union

import yaml
from pydantic import ValidationError

from domain.models import Entity, Exercise, ExerciseCategory, UserPreferences, Workout
from infrastructure.db.memory_store import InMemoryObjectStore

logger = logging.getLogger(__name__)

FILE_FORMAT_VERSION = 1

RECORD_TYPES: List[Type[Entity]] = [ExerciseCategory, Exercise, Workout, UserPreferences]


class StoreInitializationError(Exception):
    """Raised when the data file cannot be read or parsed."""


class YamlFileObjectStore(InMemoryObjectStore):
    """
    Object store persisted to a local YAML file.

    Usage:
        >>> store = YamlFileObjectStore("data/liftlog.yaml")
        >>> store.insert(ExerciseCategory(name="Legs"))  # written to disk
    """

    def __init__(self, path: Union[str, Path]) -> None:
        super().__init__()
        self._path = Path(path)
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        """
        Read the data file into the identity map.

        A missing file is an empty store.

        Raises:
            StoreInitializationError: If the file is unreadable or malformed
        """
        if not self._path.exists():
            logger.info(f"No data file at {self._path}, starting empty")
            return

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise StoreInitializationError(f"Cannot read data file {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise StoreInitializationError(f"Data file {self._path} is not a mapping")

        version = data.get("version", FILE_FORMAT_VERSION)
        if version != FILE_FORMAT_VERSION:
            raise StoreInitializationError(
                f"Unsupported data file version {version} in {self._path}"
            )

        try:
            for record_type in RECORD_TYPES:
                rows = data.get(record_type.__name__) or []
                bucket: Dict[str, Entity] = {}
                for row in rows:
                    record = record_type.model_validate(row)
                    bucket[record.id] = record
                self._records[record_type] = bucket
        except ValidationError as e:
            raise StoreInitializationError(f"Invalid record in {self._path}: {e}") from e

        logger.info(
            "Loaded %s: %s",
            self._path,
            ", ".join(f"{t.__name__}={len(self._records.get(t, {}))}" for t in RECORD_TYPES),
        )

    def _snapshot(self) -> dict:
        data: dict = {"version": FILE_FORMAT_VERSION}
        for record_type in RECORD_TYPES:
            data[record_type.__name__] = [
                record.model_dump(mode="json")
                for record in self._records.get(record_type, {}).values()
            ]
        return data

    def _persist(self) -> None:
        """Atomically rewrite the data file."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OSError(f"Cannot create data directory {self._path.parent}: {e}") from e

        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                dir=str(self._path.parent),
                suffix=".yaml",
                delete=False,
                encoding="utf-8",
            ) as tmp_file:
                tmp_path = tmp_file.name
                yaml.safe_dump(self._snapshot(), tmp_file, sort_keys=False, default_flow_style=False)

            os.replace(tmp_path, str(self._path))
        except OSError as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            logger.error(f"Failed to write data file {self._path}: {e}")
            raise
