"""Record dataset loading for SearchPro."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union
import json

from .errors import DatasetError
from .logging_setup import get_logger

logger = get_logger(__name__)

BUNDLED_DATASET = Path(__file__).resolve().parent / "data" / "records.json"

RecordId = Union[int, str]


@dataclass(frozen=True)
class Record:
    id: RecordId
    name: str

    @classmethod
    def from_mapping(cls, obj: Mapping[str, Any]) -> "Record":
        if not isinstance(obj, Mapping):
            raise DatasetError(f"record must be an object, got {type(obj).__name__}")
        if "id" not in obj or "name" not in obj:
            raise DatasetError(f"record is missing 'id' or 'name': {dict(obj)!r}")
        rec_id, name = obj["id"], obj["name"]
        if isinstance(rec_id, bool) or not isinstance(rec_id, (int, str)):
            raise DatasetError(f"record id must be an int or string: {rec_id!r}")
        if not isinstance(name, str):
            raise DatasetError(f"record name must be a string: {name!r}")
        return cls(id=rec_id, name=name)

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


Dataset = Tuple[Record, ...]


def parse_dataset(payload: Any) -> Dataset:
    if not isinstance(payload, list):
        raise DatasetError("dataset must be a JSON array of records")
    records = tuple(Record.from_mapping(obj) for obj in payload)
    seen: set[RecordId] = set()
    for rec in records:
        if rec.id in seen:
            raise DatasetError(f"duplicate record id: {rec.id!r}")
        seen.add(rec.id)
    return records


def load_dataset(path: Optional[Path] = None) -> Dataset:
    """Load the fixed record set from a JSON file (bundled data when ``path`` is None)."""
    source = Path(path) if path is not None else BUNDLED_DATASET
    try:
        payload = json.loads(source.read_text(encoding="utf-8"))
    except OSError as exc:
        logger.error("Cannot read dataset %s: %s", source, exc)
        raise DatasetError(f"cannot read dataset: {exc.strerror or exc}", source) from exc
    except json.JSONDecodeError as exc:
        logger.error("Dataset %s is not valid JSON: %s", source, exc)
        raise DatasetError(f"invalid JSON at line {exc.lineno}", source) from exc

    try:
        records = parse_dataset(payload)
    except DatasetError as exc:
        logger.error("Dataset %s rejected: %s", source, exc)
        exc.path = source
        raise
    logger.info("Loaded %d records from %s", len(records), source)
    return records


__all__ = ["BUNDLED_DATASET", "Dataset", "Record", "load_dataset", "parse_dataset"]
