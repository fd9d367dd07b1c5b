"""Layout and visibility rules of the tester's main window views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

LEFT_MARGIN = 10
TOP_MARGIN = 10
ROW_HEIGHT = 25
LABEL_WIDTH = 100
VALUE_WIDTH = 300
VALUE_LEFT = LEFT_MARGIN + LABEL_WIDTH + 10
BOTTOM_MARGIN = 10
RIGHT_MARGIN = 10

IDLE_COLOR = "#808080"
GOOD_COLOR = "#00FF00"
WARN_COLOR = "#FFFF00"
BAD_COLOR = "#FF0000"

STATUS_LEGEND: tuple[tuple[str, str], ...] = (
    (IDLE_COLOR, "空闲"),
    (GOOD_COLOR, "良率 >= 90%"),
    (WARN_COLOR, "良率 < 90%"),
    (BAD_COLOR, "良率 < 60%"),
)

VIEW_TITLES: dict[str, str] = {
    "listViewProdInfo": "产品信息列表",
    "tabWidgetMainView": "主视图",
    "groupBoxViceView": "副视图",
}

DEFAULT_VISIBLE_VIEWS: tuple[str, ...] = (
    "listViewProdInfo",
    "tabWidgetMainView",
    "tabWidgetViceView",
)

_SCENES: dict[str, tuple[tuple[str, str], ...]] = {
    "老化测试": (
        ("日志路径", "LogPath"),
        ("日志转换路径", "LogTransPath"),
        ("报告路径", "ReportPath"),
        ("自动化路径", "AutoPath"),
        ("MES路径", "MesPath"),
        ("配方路径", "RecipePath"),
        ("项目路径", "ProjectPath"),
        ("Aprog2路径", "Aprog2Path"),
        ("MultiAprog路径", "MultiAprogPath"),
    ),
    "AG06": (
        ("AG06日志路径", "LogPath"),
        ("AG06配置路径", "RecipePath"),
        ("AG06报告路径", "ReportPath"),
        ("AG06自动化路径", "AutoPath"),
        ("AG06MES路径", "MesPath"),
        ("AG06配方路径", "RecipePath"),
        ("项目路径", "ProjectPath"),
        ("Aprog2路径", "Aprog2Path"),
    ),
    "AP8000": (
        ("AP8000日志路径", "LogPath"),
        ("AP8000配置路径", "RecipePath"),
        ("AP8000报告路径", "ReportPath"),
        ("AP8000自动化路径", "AutoPath"),
        ("AP8000MES路径", "MesPath"),
        ("AP8000配方路径", "RecipePath"),
        ("项目路径", "ProjectPath"),
        ("MultiAprog路径", "MultiAprogPath"),
    ),
}

SCENES: tuple[str, ...] = tuple(_SCENES)

Rect = tuple[int, int, int, int]


@dataclass(frozen=True)
class PathLabel:
    """A configured path shown as a caption and a value on one row."""

    label: str
    value: str
    row: int

    @property
    def text(self) -> str:
        return f"{self.label}:"

    @property
    def label_rect(self) -> Rect:
        """``(x, y, width, height)`` of the caption."""
        return (LEFT_MARGIN, TOP_MARGIN + self.row * ROW_HEIGHT, LABEL_WIDTH, ROW_HEIGHT)

    @property
    def value_rect(self) -> Rect:
        """``(x, y, width, height)`` of the value."""
        return (VALUE_LEFT, TOP_MARGIN + self.row * ROW_HEIGHT, VALUE_WIDTH, ROW_HEIGHT)


def scene_path_labels(scene: str, paths: Mapping[str, str]) -> Optional[list[PathLabel]]:
    """Return the path labels of ``scene`` filled from ``paths``.

    ``paths`` maps setting names such as ``LogPath`` to values; missing ones
    show as empty. An unknown scene gives ``None``: the view is left as is.
    """
    entries = _SCENES.get(scene)
    if entries is None:
        return None
    return [
        PathLabel(caption, paths.get(key, "") or "", row)
        for row, (caption, key) in enumerate(entries)
    ]


def path_label_layout(labels: Iterable[PathLabel]) -> tuple[int, int]:
    """Return the minimum ``(width, height)`` of the area holding ``labels``."""
    rows = [label.row for label in labels]
    if not rows:
        return (0, 0)
    width = VALUE_LEFT + VALUE_WIDTH + RIGHT_MARGIN
    height = TOP_MARGIN + (max(rows) + 1) * ROW_HEIGHT + BOTTOM_MARGIN
    return (width, height)


def status_color(yield_rate: Optional[float]) -> str:
    """Return the legend colour of a library with ``yield_rate`` percent; ``None`` is idle."""
    if yield_rate is None:
        return IDLE_COLOR
    if yield_rate >= 90:
        return GOOD_COLOR
    if yield_rate >= 60:
        return WARN_COLOR
    return BAD_COLOR


def library_title(index: int, rate: float) -> str:
    """Return the title of library ``index`` (counted from 0) with its yield rate."""
    if index < 0:
        raise ValueError("library index must not be negative")
    return f"库{index + 1:02d} - {rate:.2f}%"


class ViewVisibility:
    """Which of the named views are shown; names are kept in sorted order."""

    def __init__(self, names: Sequence[str] = tuple(VIEW_TITLES)) -> None:
        self._visible: dict[str, bool] = {name: True for name in sorted(names)}

    @property
    def names(self) -> list[str]:
        return list(self._visible)

    def __contains__(self, name: object) -> bool:
        return name in self._visible

    def is_visible(self, name: str) -> bool:
        return self._visible[name]

    def load(self, visible: Optional[Iterable[str]] = None) -> None:
        """Show exactly the views listed in ``visible`` (the defaults when ``None``)."""
        shown = set(DEFAULT_VISIBLE_VIEWS if visible is None else visible)
        for name in self._visible:
            self._visible[name] = name in shown

    def set_visible(self, name: str, visible: bool) -> bool:
        """Show or hide ``name``; return whether such a view exists."""
        if name not in self._visible:
            return False
        self._visible[name] = bool(visible)
        return True

    def visible_names(self) -> list[str]:
        """Return the names of the shown views, as stored in the settings."""
        return [name for name, shown in self._visible.items() if shown]