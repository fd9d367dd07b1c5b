import pytest

from acrotester.views import (
    BAD_COLOR,
    GOOD_COLOR,
    IDLE_COLOR,
    SCENES,
    WARN_COLOR,
    PathLabel,
    ViewVisibility,
    library_title,
    path_label_layout,
    scene_path_labels,
    status_color,
)

PATHS = {
    "LogPath": "/data/log",
    "LogTransPath": "/data/trans",
    "ReportPath": "/data/report",
    "AutoPath": "/data/auto/task.tsk",
    "MesPath": "/data/mes",
    "RecipePath": "/data/recipe",
    "ProjectPath": "/data/project",
    "Aprog2Path": "/opt/aprog2",
    "MultiAprogPath": "/opt/multi",
}


def test_ag06_scene_labels():
    labels = scene_path_labels("AG06", PATHS)
    assert labels[0].label == "AG06日志路径"
    assert labels[0].value == "/data/log"
    assert labels[1].value == "/data/recipe"
    assert labels[-1].label == "Aprog2路径"
    assert labels[-1].value == "/opt/aprog2"


def test_aging_scene_ends_with_multi_aprog():
    labels = scene_path_labels("老化测试", PATHS)
    assert labels[-1].label == "MultiAprog路径"
    assert labels[-1].value == "/opt/multi"
    assert labels[1].label == "日志转换路径"


def test_rows_are_consecutive_for_every_scene():
    for scene in SCENES:
        labels = scene_path_labels(scene, PATHS)
        assert [label.row for label in labels] == list(range(len(labels)))


def test_unknown_scene_leaves_view():
    assert scene_path_labels("unknown", PATHS) is None


def test_missing_path_is_empty():
    labels = scene_path_labels("AP8000", {})
    assert all(label.value == "" for label in labels)


def test_label_text_has_colon():
    assert PathLabel("项目路径", "x", 0).text == "项目路径:"


def test_rows_stack_without_overlap():
    labels = scene_path_labels("AP8000", PATHS)
    for upper, lower in zip(labels, labels[1:]):
        x, y, w, h = upper.label_rect
        assert lower.label_rect[1] == y + h
        assert upper.value_rect[1] == y
        assert upper.value_rect[0] > x + w


def test_layout_contains_all_labels():
    labels = scene_path_labels("老化测试", PATHS)
    width, height = path_label_layout(labels)
    for label in labels:
        x, y, w, h = label.value_rect
        assert width > x + w
        assert height > y + h


def test_layout_empty():
    assert path_label_layout([]) == (0, 0)


def test_layout_grows_with_rows():
    short = path_label_layout(scene_path_labels("AG06", PATHS))
    long = path_label_layout(scene_path_labels("老化测试", PATHS))
    assert long[0] == short[0]
    assert long[1] > short[1]


@pytest.mark.parametrize(
    "rate, color",
    [
        (None, IDLE_COLOR),
        (95.0, GOOD_COLOR),
        (90, GOOD_COLOR),
        (89.9, WARN_COLOR),
        (60, WARN_COLOR),
        (36.36, BAD_COLOR),
    ],
)
def test_status_color(rate, color):
    assert status_color(rate) == color


def test_status_color_values():
    assert status_color(None) == "#808080"
    assert status_color(100) == "#00FF00"


def test_library_title():
    assert library_title(0, 36.36) == "库01 - 36.36%"


def test_library_title_negative_index():
    with pytest.raises(ValueError):
        library_title(-1, 50.0)


def test_visibility_all_shown_initially():
    views = ViewVisibility()
    assert views.visible_names() == views.names


def test_visibility_default_load():
    views = ViewVisibility()
    views.load()
    assert views.visible_names() == ["listViewProdInfo", "tabWidgetMainView"]
    assert not views.is_visible("groupBoxViceView")


def test_visibility_round_trip():
    views = ViewVisibility()
    views.set_visible("tabWidgetMainView", False)
    saved = views.visible_names()
    other = ViewVisibility()
    other.load(saved)
    assert other.visible_names() == saved
    assert "tabWidgetMainView" not in saved


def test_set_visible_unknown_view():
    views = ViewVisibility()
    assert views.set_visible("missing", True) is False
    assert "missing" not in views.visible_names()


def test_names_sorted():
    views = ViewVisibility(["b", "a", "c"])
    assert views.names == ["a", "b", "c"]
    assert views.set_visible("b", False) is True
    assert views.visible_names() == ["a", "c"]