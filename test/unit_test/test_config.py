"""Unit tests for site settings and demo.json validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from physics_demos.site.config import DemoConfig, SiteSettings, load_settings


class TestSiteSettings:
    def test_directories_derive_from_root(self, tmp_path):
        settings = load_settings(tmp_path)
        assert settings.templates_dir == tmp_path / "templates"
        assert settings.public_dir == tmp_path / "public"
        assert settings.demos_dir == tmp_path / "demos"
        assert settings.dist_dir == tmp_path / "dist"
        assert settings.navigation_file == tmp_path / "data" / "navigation.json"

    def test_explicit_directory_wins(self, tmp_path):
        settings = load_settings(tmp_path, dist_dir=tmp_path / "out")
        assert settings.dist_dir == tmp_path / "out"

    def test_defaults(self, tmp_path):
        settings = load_settings(tmp_path)
        assert settings.site_url == "https://physics-demos.com"
        assert settings.site_name == "物理演示网站"
        assert settings.language == "zh-CN"
        assert settings.minify is True

    def test_root_defaults_to_cwd(self, tmp_path):
        assert SiteSettings().root_dir == Path.cwd()

    def test_environment_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PHYSICS_DEMOS_SITE_URL", "https://staging.example.org/")
        monkeypatch.setenv("PHYSICS_DEMOS_MINIFY", "false")
        settings = load_settings(tmp_path)
        assert settings.site_url == "https://staging.example.org"
        assert settings.minify is False

    def test_keyword_overrides_beat_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PHYSICS_DEMOS_SITE_NAME", "from env")
        assert load_settings(tmp_path, site_name="explicit").site_name == "explicit"

    def test_dotenv_file_is_read_from_cwd(self, tmp_path):
        (tmp_path / ".env").write_text("PHYSICS_DEMOS_LANGUAGE=en\n", encoding="utf-8")
        assert load_settings(tmp_path).language == "en"

    def test_absolute_url(self, tmp_path):
        settings = load_settings(tmp_path, site_url="https://example.org")
        assert settings.absolute_url("/") == "https://example.org"
        assert settings.absolute_url("") == "https://example.org"
        assert settings.absolute_url("/optics") == "https://example.org/optics"


class TestDemoConfig:
    def test_valid(self):
        config = DemoConfig.model_validate({
            "title": "凸透镜成像",
            "description": "d",
            "url": "/optics/convex-lens",
            "demo": "convex-lens",
            "parameters": {"u": 150},
            "author": "extra fields are kept",
        })
        assert config.parameters == {"u": 150.0}
        assert config.model_dump()["author"] == "extra fields are kept"

    def test_optional_fields(self):
        config = DemoConfig(title="t", description="d", url="/x")
        assert config.demo is None
        assert config.parameters == {}

    @pytest.mark.parametrize(
        "data",
        [
            {"title": "t", "description": "d"},
            {"title": " ", "description": "d", "url": "/x"},
            {"title": "t", "description": "d", "url": "optics/x"},
        ],
    )
    def test_invalid(self, data):
        with pytest.raises(ValidationError):
            DemoConfig.model_validate(data)
