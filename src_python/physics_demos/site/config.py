"""
Copyright 2024 The Physics Demos authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

"""
Site build settings.

Values come from keyword arguments, then PHYSICS_DEMOS_* environment
variables, then a .env file. Directories default to the conventional
layout under `root_dir`.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SiteSettings(BaseSettings):
    """Paths and metadata used by the site builder and project checker."""

    root_dir: Path = Field(default_factory=Path.cwd, description="Project root holding the site content")
    templates_dir: Optional[Path] = Field(default=None, description="Jinja2 templates (default: root/templates)")
    public_dir: Optional[Path] = Field(default=None, description="Static assets and rendered pages (default: root/public)")
    data_dir: Optional[Path] = Field(default=None, description="navigation.json location (default: root/data)")
    demos_dir: Optional[Path] = Field(default=None, description="One folder per demo (default: root/demos)")
    dist_dir: Optional[Path] = Field(default=None, description="Deployable output (default: root/dist)")

    site_url: str = Field(default="https://physics-demos.com", description="Absolute site URL without trailing slash")
    site_name: str = Field(default="物理演示网站")
    site_description: str = Field(default="专业的物理现象交互式演示网站")
    language: str = Field(default="zh-CN")
    home_title: str = Field(default="首页", description="Breadcrumb label of the home page")

    minify: bool = Field(default=True, description="Minify HTML, CSS and JS in dist/")

    model_config = SettingsConfigDict(
        env_prefix="PHYSICS_DEMOS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("site_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @model_validator(mode="after")
    def _derive_directories(self) -> "SiteSettings":
        root = self.root_dir
        defaults = {
            "templates_dir": "templates",
            "public_dir": "public",
            "data_dir": "data",
            "demos_dir": "demos",
            "dist_dir": "dist",
        }
        for attr, name in defaults.items():
            if getattr(self, attr) is None:
                setattr(self, attr, root / name)
        return self

    @property
    def navigation_file(self) -> Path:
        return self.data_dir / "navigation.json"

    def absolute_url(self, path: str) -> str:
        """Join a site-relative path onto the site URL; '/' and '' map to the bare URL."""
        if not path or path == "/":
            return self.site_url
        return f"{self.site_url}{path}"


class DemoConfig(BaseModel):
    """Contents of a demo folder's demo.json."""

    title: str
    description: str
    url: str
    demo: Optional[str] = Field(default=None, description="Slug of the Python demo used for the preview")
    parameters: dict[str, float] = Field(default_factory=dict, description="Initial slider values for the preview")
    keywords: Optional[str] = None

    model_config = {"extra": "allow"}

    @field_validator("title", "description", "url")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("url")
    @classmethod
    def _absolute_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("URL must start with /")
        return value


def load_settings(root_dir=None, **overrides) -> SiteSettings:
    """Build settings for a project root, applying explicit overrides."""
    if root_dir is not None:
        overrides["root_dir"] = Path(root_dir)
    return SiteSettings(**overrides)
