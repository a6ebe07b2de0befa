"""Unit tests for the static-site build."""

import json
import xml.etree.ElementTree as ET

import pytest

from physics_demos.exceptions import DemoConfigError, SiteBuildError
from physics_demos.site.builder import build_site, load_demo_config, page_output_path
from physics_demos.site.config import load_settings
from physics_demos.site.sitemap import SITEMAP_NS


@pytest.fixture
def settings(site_root):
    return load_settings(site_root, minify=False)


def test_page_output_path(tmp_path):
    assert page_output_path(tmp_path, "/") == tmp_path / "index.html"
    assert page_output_path(tmp_path, "/optics/convex-lens") == tmp_path / "optics" / "convex-lens" / "index.html"


class TestBuild:
    def test_generates_every_page(self, settings):
        report = build_site(settings)
        dist = settings.dist_dir

        # home + 2 categories + 5 demos
        assert len(report.pages) == 8
        for url in ("/", "/optics", "/mechanics", "/optics/convex-lens", "/mechanics/friction-inclined-plane"):
            assert page_output_path(dist, url).exists(), url
        assert (dist / "css" / "style.css").exists()

    def test_demo_folder_assets(self, settings):
        build_site(settings)
        demo_dir = settings.dist_dir / "optics" / "convex-lens"

        assert (demo_dir / "demo.css").exists()
        assert (demo_dir / "preview.svg").read_text(encoding="utf-8").startswith("<svg")
        assert not (demo_dir / "demo.json").exists()
        assert not (demo_dir / "demo.html").exists()

    def test_demo_page_content(self, settings):
        build_site(settings)
        html = page_output_path(settings.dist_dir, "/optics/convex-lens").read_text(encoding="utf-8")

        assert '<link rel="canonical" href="https://physics-demos.com/optics/convex-lens">' in html
        assert "<title>凸透镜成像 - 物理演示网站</title>" in html
        assert "LearningResource" in html
        assert "u &gt; 2f" in html
        assert 'class="lens-shape"' in html
        assert "倒立 缩小 实像" in html
        assert '<li class="active">' in html

    def test_structured_data_is_valid_json(self, settings):
        build_site(settings)
        html = page_output_path(settings.dist_dir, "/mechanics").read_text(encoding="utf-8")
        start = html.index('<script type="application/ld+json">') + len('<script type="application/ld+json">')
        end = html.index("</script>", start)
        doc = json.loads(html[start:end])
        assert doc["@type"] == "WebPage"
        assert doc["name"] == "力学"

    def test_home_page_lists_categories(self, settings):
        build_site(settings)
        html = (settings.dist_dir / "index.html").read_text(encoding="utf-8")
        assert 'href="/optics"' in html
        assert 'href="/mechanics"' in html
        assert "<title>物理演示网站</title>" in html

    def test_sitemap_lists_built_pages(self, settings):
        report = build_site(settings)
        root = ET.fromstring(report.sitemap.read_bytes())
        locs = [el.text for el in root.iter(f"{{{SITEMAP_NS}}}loc")]
        assert len(locs) == 8
        assert locs[0] == "https://physics-demos.com"
        assert locs[0] == settings.absolute_url("/")
        assert "https://physics-demos.com/optics/air-water-refraction" in locs

    def test_minified_build(self, site_root):
        report = build_site(load_settings(site_root), clean=True)
        html = (site_root / "dist" / "index.html").read_text(encoding="utf-8")
        assert report.minified >= 9
        assert "structured data" not in html

    def test_missing_index_template(self, settings):
        (settings.templates_dir / "index.html").unlink()
        with pytest.raises(SiteBuildError, match="index.html"):
            build_site(settings)

    def test_non_utf8_asset_is_left_alone(self, site_root):
        legacy = site_root / "public" / "css" / "legacy.css"
        raw = "a { content: 'é'; }".encode("latin-1")
        legacy.write_bytes(raw)
        report = build_site(load_settings(site_root), clean=True)
        assert len(report.pages) == 8
        assert (site_root / "dist" / "css" / "legacy.css").read_bytes() == raw

    def test_clean_removes_stale_output(self, settings):
        stale = settings.dist_dir / "old.html"
        stale.parent.mkdir(parents=True)
        stale.write_text("old", encoding="utf-8")
        build_site(settings, clean=True)
        assert not stale.exists()

    def test_missing_templates_dir(self, settings):
        settings.templates_dir = settings.root_dir / "missing"
        with pytest.raises(SiteBuildError, match="Templates directory not found"):
            build_site(settings)

    def test_demo_without_python_preview(self, settings):
        config_path = settings.demos_dir / "convex-lens" / "demo.json"
        data = json.loads(config_path.read_text(encoding="utf-8"))
        del data["demo"]
        config_path.write_text(json.dumps(data), encoding="utf-8")

        build_site(settings)
        demo_dir = settings.dist_dir / "optics" / "convex-lens"
        assert not (demo_dir / "preview.svg").exists()
        assert "u &gt; 2f" in (demo_dir / "index.html").read_text(encoding="utf-8")

    def test_unknown_demo_slug_fails(self, settings):
        config_path = settings.demos_dir / "convex-lens" / "demo.json"
        data = json.loads(config_path.read_text(encoding="utf-8"))
        data["demo"] = "pendulum"
        config_path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(SiteBuildError, match="pendulum"):
            build_site(settings)

    def test_out_of_range_preview_parameter_fails(self, settings):
        config_path = settings.demos_dir / "convex-lens" / "demo.json"
        data = json.loads(config_path.read_text(encoding="utf-8"))
        data["parameters"] = {"u": 1000}
        config_path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(SiteBuildError):
            build_site(settings)


class TestLoadDemoConfig:
    def test_missing_file(self, tmp_path):
        with pytest.raises(DemoConfigError, match="file not found"):
            load_demo_config(tmp_path / "demo.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "demo.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(DemoConfigError, match="invalid JSON"):
            load_demo_config(path)

    def test_missing_fields(self, tmp_path):
        path = tmp_path / "demo.json"
        path.write_text(json.dumps({"title": "t"}), encoding="utf-8")
        with pytest.raises(DemoConfigError):
            load_demo_config(path)

    def test_broken_demo_folder_fails_build(self, site_root):
        (site_root / "demos" / "broken").mkdir()
        (site_root / "demos" / "broken" / "demo.json").write_text("{", encoding="utf-8")
        with pytest.raises(DemoConfigError):
            build_site(load_settings(site_root, minify=False))
