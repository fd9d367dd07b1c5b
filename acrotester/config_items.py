"""Flow and spec items of a tester configuration file, and their JSON form."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from os import PathLike
from pathlib import Path
from typing import Any, Iterable, Mapping

FLOW_SECTION = "FlowConfig"
FLOW_LIST = "TestItems"
SPEC_SECTION = "SpecConfig"
SPEC_LIST = "SpecList"

# The exported spec items carry their comment under this key, while imports
# read "Comment"; files written by earlier versions rely on it.
SPEC_EXPORT_COMMENT_KEY = "Commment"


class ConfigError(Exception):
    """A configuration file cannot be read, written or understood."""


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _text_to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _as_obj(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


@dataclass
class TestItem:
    """One step of the test flow."""

    __test__ = False

    id: str = ""
    class_name: str = ""
    alias: str = ""
    test_mode: str = ""
    loop_count: str = ""
    pass_do: str = ""
    fail_do: str = ""
    comment: str = ""

    @classmethod
    def from_json(cls, obj: Any) -> "TestItem":
        obj = _as_obj(obj)
        return cls(
            id=_as_str(obj.get("TestItemID")),
            class_name=_as_str(obj.get("ClassName")),
            alias=_as_str(obj.get("Alias")),
            test_mode=_as_str(obj.get("TestMode")),
            loop_count=str(_as_int(obj.get("LoopCount"))),
            pass_do=_as_str(obj.get("PassDo")),
            fail_do=_as_str(obj.get("FailDo")),
            comment=_as_str(obj.get("Comment")),
        )

    def to_json(self) -> dict[str, Any]:
        """Return the object stored in ``FlowConfig.TestItems``."""
        return {
            "TestItemID": self.id,
            "ClassName": self.class_name,
            "Alias": self.alias,
            "TestMode": self.test_mode,
            "LoopCount": _text_to_int(self.loop_count),
            "PassDo": self.pass_do,
            "FailDo": self.fail_do,
            "Comment": self.comment,
        }

    def set_column(self, column: int, text: str) -> bool:
        """Set the field edited in table ``column``; return whether it exists."""
        return _set_column(self, _FLOW_COLUMNS, column, text)


_FLOW_COLUMNS: tuple[str, ...] = (
    "id",
    "class_name",
    "alias",
    "loop_count",
    "test_mode",
    "pass_do",
    "fail_do",
    "comment",
)


@dataclass
class SpecItem:
    """Limits and bin of one tested parameter set."""

    id: str = ""
    test_item_name: str = ""
    alias_name: str = ""
    params1_name: str = ""
    params1_value: str = ""
    limit1_lower: str = ""
    limit1_upper: str = ""
    params2_name: str = ""
    params2_value: str = ""
    limit2_lower: str = ""
    limit2_upper: str = ""
    params3_name: str = ""
    params3_value: str = ""
    limit3_lower: str = ""
    limit3_upper: str = ""
    bin_name: str = ""
    comment: str = ""

    @classmethod
    def from_json(cls, obj: Any) -> "SpecItem":
        obj = _as_obj(obj)
        values = {
            name: _as_str(obj.get(key)) for name, key in _SPEC_KEYS if name != "comment"
        }
        values["comment"] = _as_str(obj.get("Comment"))
        return cls(**values)

    def to_json(self) -> dict[str, Any]:
        """Return the object stored in ``SpecConfig.SpecList``."""
        result = {key: getattr(self, name) for name, key in _SPEC_KEYS if name != "comment"}
        result[SPEC_EXPORT_COMMENT_KEY] = self.comment
        return result

    def set_column(self, column: int, text: str) -> bool:
        """Set the field edited in table ``column``; return whether it exists."""
        return _set_column(self, _SPEC_COLUMNS, column, text)


_SPEC_KEYS: tuple[tuple[str, str], ...] = (
    ("id", "SpecItemID"),
    ("test_item_name", "TestItemName"),
    ("alias_name", "AliasName"),
    ("params1_name", "Params1Name"),
    ("params1_value", "Params1Value"),
    ("limit1_lower", "Limit1Lower"),
    ("limit1_upper", "Limit1Upper"),
    ("params2_name", "Params2Name"),
    ("params2_value", "Params2Value"),
    ("limit2_lower", "Limit2Lower"),
    ("limit2_upper", "Limit2Upper"),
    ("params3_name", "Params3Name"),
    ("params3_value", "Params3Value"),
    ("limit3_lower", "Limit3Lower"),
    ("limit3_upper", "Limit3Upper"),
    ("bin_name", "BinName"),
    ("comment", "Comment"),
)

_SPEC_COLUMNS: tuple[str, ...] = tuple(f.name for f in fields(SpecItem))


def _set_column(item: Any, columns: tuple[str, ...], column: int, text: str) -> bool:
    if not 0 <= column < len(columns):
        return False
    setattr(item, columns[column], text)
    return True


def _section_list(document: Any, section: str, list_key: str) -> list[Any]:
    if not isinstance(document, Mapping):
        raise ConfigError("file format error or invalid content")
    config = document.get(section)
    if not isinstance(config, Mapping):
        raise ConfigError(f"configuration lacks the {section} section")
    items = config.get(list_key)
    if not isinstance(items, list):
        raise ConfigError(f"{section} lacks the {list_key} section")
    return items


def load_flow_items(document: Any) -> list[TestItem]:
    """Return the test items of a parsed configuration document."""
    return [TestItem.from_json(value) for value in _section_list(document, FLOW_SECTION, FLOW_LIST)]


def load_spec_items(document: Any) -> list[SpecItem]:
    """Return the spec items of a parsed configuration document."""
    return [SpecItem.from_json(value) for value in _section_list(document, SPEC_SECTION, SPEC_LIST)]


def _read_document(path: str | PathLike[str]) -> dict[str, Any]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot open file: {path}") from exc
    try:
        document = json.loads(text)
    except ValueError as exc:
        raise ConfigError("file format error or invalid content") from exc
    if not isinstance(document, dict):
        raise ConfigError("file format error or invalid content")
    return document


def import_config(path: str | PathLike[str], kind: str) -> list[TestItem] | list[SpecItem]:
    """Read the flow (``kind="flow"``) or spec (``kind="spec"``) items of a file."""
    if kind not in ("flow", "spec"):
        raise ConfigError(f"unknown configuration kind: {kind!r}")
    document = _read_document(path)
    if kind == "flow":
        return load_flow_items(document)
    return load_spec_items(document)


def _replace_section(
    path: str | PathLike[str], section: str, list_key: str, entries: list[dict[str, Any]]
) -> None:
    document = _read_document(path)
    config = document.get(section)
    config = dict(config) if isinstance(config, dict) else {}
    config[list_key] = entries
    document[section] = config
    text = json.dumps(document, indent=4, sort_keys=True, ensure_ascii=False) + "\n"
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot save file: {path}") from exc


def export_flow(path: str | PathLike[str], items: Iterable[TestItem]) -> None:
    """Replace ``FlowConfig.TestItems`` in the existing file at ``path``."""
    _replace_section(path, FLOW_SECTION, FLOW_LIST, [item.to_json() for item in items])


def export_spec(path: str | PathLike[str], items: Iterable[SpecItem]) -> None:
    """Replace ``SpecConfig.SpecList`` in the existing file at ``path``."""
    _replace_section(path, SPEC_SECTION, SPEC_LIST, [item.to_json() for item in items])