"""Unit tests for navigation loading, active marking and breadcrumbs."""

import json

import pytest

from physics_demos.exceptions import SiteBuildError
from physics_demos.site.navigation import Navigation, breadcrumb, load_navigation, set_active


@pytest.fixture
def navigation(site_root):
    return load_navigation(site_root / "data" / "navigation.json")


def test_load_bundled_navigation(navigation):
    assert [item.title for item in navigation.items] == ["光学", "力学"]
    assert navigation.items[0].subitems[0].url == "/optics/convex-lens"


def test_missing_file_gives_empty_menu(tmp_path):
    assert load_navigation(tmp_path / "nope.json") == Navigation()


@pytest.mark.parametrize("content", ["{not json", json.dumps({"items": [{"title": "x"}]})])
def test_malformed_file_is_a_build_error(tmp_path, content):
    path = tmp_path / "navigation.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(SiteBuildError):
        load_navigation(path)


def test_set_active_marks_item_and_ancestors(navigation):
    marked = set_active(navigation, "/mechanics/friction-inclined-plane")

    optics, mechanics = marked.items
    assert mechanics.active
    assert [sub.active for sub in mechanics.subitems] == [False, True]
    assert not optics.active
    assert not any(sub.active for sub in optics.subitems)
    # Input untouched
    assert not navigation.items[1].active


def test_set_active_clears_previous_marks(navigation):
    first = set_active(navigation, "/optics")
    second = set_active(first, "/mechanics")
    assert [item.active for item in second.items] == [False, True]


def test_breadcrumb_for_demo(navigation):
    crumbs = breadcrumb(navigation, "/optics/air-water-refraction")
    assert [(c.title, c.url) for c in crumbs] == [
        ("首页", "/"),
        ("光学", "/optics"),
        ("光的折射", "/optics/air-water-refraction"),
    ]


def test_breadcrumb_for_home_and_unknown_paths(navigation):
    assert [c.title for c in breadcrumb(navigation, "/")] == ["首页"]
    assert [c.title for c in breadcrumb(navigation, "/extra/notes", home_title="Home")] == ["Home", "notes"]
