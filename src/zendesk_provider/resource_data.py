"""In-memory resource data: the id plus attribute values a lifecycle reads and writes."""
import copy
from typing import Any, Dict, Mapping, Tuple

from zendesk_provider.exceptions import ZendeskValidationError


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, list, tuple, set, dict)):
        return len(value) == 0
    return False


class ResourceData:
    """Attribute values of one resource instance, addressed by schema name.

    `get_ok` follows the provider convention: a key counts as set only when it
    holds a non-zero value, so `False`, `0`, `""` and empty collections read as
    unset.
    """

    def __init__(self, values: Mapping[str, Any] | None = None, id: str = ""):
        self._values: Dict[str, Any] = dict(values or {})
        self._id = id

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, id: str) -> None:
        self._id = id

    def get(self, key: str) -> Any:
        return self._values.get(key)

    def get_ok(self, key: str) -> Tuple[Any, bool]:
        value = self._values.get(key)
        return value, not _is_zero(value)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def state(self) -> Dict[str, Any]:
        return copy.deepcopy(self._values)

    def __repr__(self) -> str:
        return f"ResourceData(id={self._id!r}, values={self._values!r})"


def set_schema_fields(d: ResourceData, fields: Mapping[str, Any]) -> None:
    for key, value in fields.items():
        d.set(key, value)


def string_list(value: Any) -> list[str]:
    """Normalise a list/set attribute of strings, dropping duplicates but keeping order."""
    seen: Dict[str, None] = {}
    for item in value or []:
        seen.setdefault(str(item), None)
    return list(seen)


def atoi64(value: str) -> int:
    """Parse a base-10 id: ASCII digits with an optional leading minus sign."""
    text = str(value).strip()
    digits = text[1:] if text.startswith("-") else text
    if not (digits.isascii() and digits.isdigit()):
        raise ZendeskValidationError(f"could not parse id {value!r}")
    return int(text, 10)
