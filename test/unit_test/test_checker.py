"""Unit tests for the content-tree checker."""

import json

import pytest

from physics_demos.site.checker import ProjectChecker


@pytest.fixture
def checker(site_root):
    return ProjectChecker(site_root)


def test_bundled_content_passes(checker):
    assert checker.run_all_checks()
    assert checker.errors == []
    # dist/ only exists after a build
    assert checker.warnings == ["Missing directory: dist"]


def test_missing_required_file_is_an_error(site_root, checker):
    (site_root / "templates" / "footer.html").unlink()
    assert not checker.run_all_checks()
    assert "Missing required file: templates/footer.html" in checker.errors


def test_missing_index_template_is_an_error(site_root, checker):
    (site_root / "templates" / "index.html").unlink()
    assert not checker.run_all_checks()
    assert "Missing required file: templates/index.html" in checker.errors


def test_non_utf8_stylesheet_is_a_warning(site_root, checker):
    (site_root / "public" / "css" / "legacy.css").write_bytes("a { content: 'é'; }".encode("latin-1"))
    assert checker.run_all_checks()
    assert "File is not UTF-8: public/css/legacy.css" in checker.warnings


def test_missing_demo_file_is_a_warning(site_root, checker):
    (site_root / "demos" / "convex-lens" / "demo.css").unlink()
    assert checker.run_all_checks()
    assert "Missing demo file: demos/convex-lens/demo.css" in checker.warnings


def test_malformed_demo_config(site_root, checker):
    (site_root / "demos" / "concave-lens" / "demo.json").write_text("{", encoding="utf-8")
    assert not checker.run_all_checks()
    assert any(e.startswith("Malformed demo config: demos/concave-lens/demo.json") for e in checker.errors)


def test_demo_config_fields(site_root, checker):
    path = site_root / "demos" / "concave-lens" / "demo.json"
    path.write_text(json.dumps({"title": "t", "url": "optics/x", "demo": "pendulum"}), encoding="utf-8")

    assert not checker.run_all_checks()
    assert "Invalid demo URL: demos/concave-lens/demo.json -> URL must start with /" in checker.errors
    assert "Missing demo config field: demos/concave-lens/demo.json -> description" in checker.warnings
    assert "Unknown demo: demos/concave-lens/demo.json -> pendulum" in checker.warnings


def test_style_warnings(site_root, checker):
    (site_root / "templates" / "extra.html").write_text("<div>\n   <p>x</p>\n</div>\n", encoding="utf-8")
    (site_root / "public" / "css" / "style.css").write_text("a { color: red !important; }\n", encoding="utf-8")
    (site_root / "public" / "js").mkdir()
    (site_root / "public" / "js" / "app.js").write_text("var x = 1;\n", encoding="utf-8")
    vendored = site_root / "public" / "node_modules" / "lib"
    vendored.mkdir(parents=True)
    (vendored / "index.js").write_text("var y = 2;\n", encoding="utf-8")

    assert checker.run_all_checks()
    assert "Inconsistent template indentation: templates/extra.html:2" in checker.warnings
    assert "!important used in CSS: public/css/style.css" in checker.warnings
    assert "var declaration in JS: public/js/app.js" in checker.warnings
    assert not any("node_modules" in w for w in checker.warnings)


def test_missing_demos_directory(tmp_path):
    checker = ProjectChecker(tmp_path)
    assert not checker.run_all_checks()
    assert "demos directory does not exist" in checker.warnings
    assert "Missing required file: data/navigation.json" in checker.errors


def test_rerun_resets_results(site_root, checker):
    (site_root / "templates" / "footer.html").unlink()
    checker.run_all_checks()
    (site_root / "templates" / "footer.html").write_text("<footer></footer>\n", encoding="utf-8")
    assert checker.run_all_checks()
    assert checker.errors == []
