"""Client-local key/value storage (selectedCity, deviceId) in a JSON file."""

from __future__ import annotations

import json
import uuid
from pathlib import Path
from typing import Any

from src.config import CLIENT_STORE_FILE
from src.errors import ValidationError
from src.models import Location
from src.utils import report_error

SELECTED_CITY_KEY = "selectedCity"
DEVICE_ID_KEY = "deviceId"


class LocalStorage:
    def __init__(self, path: Path | str = CLIENT_STORE_FILE) -> None:
        self.path = Path(path)

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            report_error("client storage: read", e)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Any:
        return self._read_all().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read_all()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")

    def remove(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is not None:
            self.path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


def get_or_create_device_id(storage: LocalStorage) -> str:
    """Opaque id, generated once and reused on every later load."""
    device_id = storage.get(DEVICE_ID_KEY)
    if isinstance(device_id, str) and device_id:
        return device_id
    device_id = uuid.uuid4().hex
    storage.set(DEVICE_ID_KEY, device_id)
    return device_id


def load_selected_city(storage: LocalStorage) -> Location | None:
    raw = storage.get(SELECTED_CITY_KEY)
    if not raw:
        return None
    try:
        return Location.from_payload(raw)
    except ValidationError as e:
        report_error("client storage: selectedCity", e)
        return None


def save_selected_city(storage: LocalStorage, location: Location) -> None:
    storage.set(SELECTED_CITY_KEY, location.to_dict())
