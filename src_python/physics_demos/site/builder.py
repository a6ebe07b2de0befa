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

import json
import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, TemplateError, select_autoescape
from markupsafe import Markup
from pydantic import ValidationError

from ..demos import get_demo
from ..exceptions import DemoConfigError, PhysicsDemosError, SiteBuildError
from . import structured_data
from .config import DemoConfig, SiteSettings
from .minify import minify_tree
from .navigation import breadcrumb, load_navigation, set_active
from .sitemap import SitemapEntry, write_sitemap

logger = logging.getLogger(__name__)

# Files of a demo folder that are build inputs rather than assets
DEMO_SOURCE_FILES = {"demo.json", "demo.html"}


@dataclass
class BuildReport:
    """What a build produced."""

    pages: List[Path] = field(default_factory=list)
    sitemap_entries: List[SitemapEntry] = field(default_factory=list)
    minified: int = 0
    sitemap: Path = None


def load_demo_config(path: Path) -> DemoConfig:
    """
    Read and validate a demo.json file.

    Raises:
        DemoConfigError: If the file is missing, not JSON, or lacks fields
    """
    if not path.exists():
        raise DemoConfigError(path, "file not found")
    try:
        return DemoConfig.model_validate(json.loads(path.read_text(encoding="utf-8")))
    except json.JSONDecodeError as exc:
        raise DemoConfigError(path, f"invalid JSON: {exc}") from exc
    except ValidationError as exc:
        raise DemoConfigError(path, str(exc)) from exc


def copy_directory(src: Path, dest: Path, skip=()):
    """Recursively copy src into dest, merging with existing content."""
    dest.mkdir(parents=True, exist_ok=True)
    for entry in src.iterdir():
        if entry.name in skip:
            continue
        target = dest / entry.name
        if entry.is_dir():
            copy_directory(entry, target)
        else:
            shutil.copy2(entry, target)


def page_output_path(root: Path, url: str) -> Path:
    """Map a site path like '/optics/lens' to root/optics/lens/index.html."""
    relative = url.strip("/")
    return (root / relative / "index.html") if relative else root / "index.html"


class SiteBuilder:
    """
    Static-site generator for the demo collection.

    Renders the home page, one page per navigation category and one page
    per demo folder into the public directory, copies public into dist,
    minifies dist and writes dist/sitemap.xml.

    Attributes:
        settings (SiteSettings): Paths and site metadata
        env (jinja2.Environment): Template environment rooted at templates_dir
    """

    def __init__(self, settings: SiteSettings):
        self.settings = settings
        self.env = self._make_env([settings.templates_dir])
        self.report = BuildReport()

    @staticmethod
    def _make_env(search_path):
        env = Environment(
            loader=ChoiceLoader([FileSystemLoader(str(p)) for p in search_path]),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        return env

    def _page_data(self, title, description, keywords, url, og_image, navigation, crumbs, body, document):
        s = self.settings
        return {
            "site_name": s.site_name,
            "language": s.language,
            "title": title,
            "description": description,
            "keywords": keywords,
            "canonical_url": s.absolute_url(url),
            "og_image": og_image,
            "navigation": navigation,
            "breadcrumb": crumbs,
            "body": Markup(body),
            "structured_data": Markup(structured_data.to_script_json(document)),
        }

    @staticmethod
    def render_template(env, template_name, **context):
        """Render one template, turning Jinja2 failures into SiteBuildError."""
        try:
            return env.get_template(template_name).render(**context)
        except TemplateError as exc:
            raise SiteBuildError(f"Failed to render {template_name}: {exc}") from exc

    def render_page(self, output_path: Path, data: dict, template_name="layout.html"):
        """Render the layout with page data and write it to output_path."""
        html = self.render_template(self.env, template_name, **data)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        self.report.pages.append(output_path)
        logger.info("Generated: %s", output_path)
        return output_path

    def generate_index(self):
        s = self.settings
        navigation = set_active(load_navigation(s.navigation_file), "/")
        body = self.render_template(self.env, "index.html", site_name=s.site_name, navigation=navigation)
        data = self._page_data(
            title=s.site_name,
            description=f"{s.site_description}，提供力学、光学、电磁学等物理现象的直观展示和原理讲解。",
            keywords="物理演示,物理实验,交互式学习,物理教学,科学教育,力学演示,光学演示,电磁学演示",
            url="/",
            og_image="/images/og-image.jpg",
            navigation=navigation,
            crumbs=breadcrumb(navigation, "/", s.home_title),
            body=body,
            document=structured_data.web_page(s, s.site_name, s.site_description, "/"),
        )
        self.render_page(page_output_path(s.public_dir, "/"), data)
        self.report.sitemap_entries.append(SitemapEntry("/", kind="home", changefreq="daily"))

    def generate_categories(self):
        s = self.settings
        base_navigation = load_navigation(s.navigation_file)

        for category in base_navigation.items:
            navigation = set_active(base_navigation, category.url)
            crumbs = breadcrumb(navigation, category.url, s.home_title)
            titles = "、".join(item.title for item in category.subitems)
            body = self.render_template(self.env, "category.html", category=category)
            data = self._page_data(
                title=category.title,
                description=f"探索{category.title}相关的物理演示，包括{titles}等交互式演示",
                keywords=f"物理演示,{category.title},交互式学习,物理教学",
                url=category.url,
                og_image="/images/category-og-image.jpg",
                navigation=navigation,
                crumbs=crumbs,
                body=body,
                document=structured_data.web_page(
                    s, category.title, f"探索{category.title}相关的物理演示", category.url
                ),
            )
            self.render_page(page_output_path(s.public_dir, category.url), data)
            self.report.sitemap_entries.append(SitemapEntry(category.url, kind="category"))

    def _demo_preview(self, config: DemoConfig, output_dir: Path):
        """Render the Python demo named in demo.json; returns (svg, readout) or (None, None)."""
        if not config.demo:
            return None, None
        try:
            demo = get_demo(config.demo, **config.parameters)
        except PhysicsDemosError as exc:
            raise SiteBuildError(f"Cannot build preview for {config.url}: {exc}") from exc
        svg = demo.render()
        output_dir.mkdir(parents=True, exist_ok=True)
        (output_dir / "preview.svg").write_text(svg, encoding="utf-8")
        return Markup(svg), demo.readout()

    def generate_demos(self):
        s = self.settings
        if not s.demos_dir.is_dir():
            logger.info("Demos directory not found, skipping demo generation")
            return

        base_navigation = load_navigation(s.navigation_file)
        folders = sorted(p for p in s.demos_dir.iterdir() if p.is_dir())

        for folder in folders:
            config = load_demo_config(folder / "demo.json")
            navigation = set_active(base_navigation, config.url)
            crumbs = breadcrumb(navigation, config.url, s.home_title)
            output_dir = page_output_path(s.public_dir, config.url).parent

            preview_svg, readout = self._demo_preview(config, output_dir)
            demo_env = self._make_env([folder, s.templates_dir])
            content = self.render_template(
                demo_env, "demo.html", **config.model_dump(), preview_svg=preview_svg, readout=readout
            )

            data = self._page_data(
                title=config.title,
                description=config.description,
                keywords=config.keywords or f"物理演示,{config.title},交互式学习,物理教学",
                url=config.url,
                og_image="/images/demo-og-image.jpg",
                navigation=navigation,
                crumbs=crumbs,
                body=content,
                document=structured_data.learning_resource(s, config, crumbs),
            )
            self.render_page(output_dir / "index.html", data)
            copy_directory(folder, output_dir, skip=DEMO_SOURCE_FILES)
            self.report.sitemap_entries.append(SitemapEntry(config.url, kind="demo"))

    def copy_static_assets(self):
        s = self.settings
        copy_directory(s.public_dir, s.dist_dir)
        logger.info("Static assets copied to %s", s.dist_dir)

    def generate_sitemap(self, lastmod=None):
        s = self.settings
        path = write_sitemap(s.dist_dir / "sitemap.xml", s.site_url, self.report.sitemap_entries, lastmod)
        self.report.sitemap = path
        logger.info("Sitemap generated: %s", path)
        return path

    def build(self, clean=False):
        """
        Run the full build.

        Args:
            clean (bool): Remove dist/ before copying

        Returns:
            BuildReport
        """
        s = self.settings
        logger.info("Building physics demonstration website...")
        self.report = BuildReport()

        if not s.templates_dir.is_dir():
            raise SiteBuildError(f"Templates directory not found: {s.templates_dir}")
        if clean and s.dist_dir.exists():
            shutil.rmtree(s.dist_dir)
        s.public_dir.mkdir(parents=True, exist_ok=True)

        self.generate_index()
        self.generate_categories()
        self.generate_demos()
        self.copy_static_assets()

        if s.minify:
            self.report.minified = minify_tree(s.dist_dir)

        self.generate_sitemap()
        logger.info("Build completed successfully!")
        return self.report


def build_site(settings: SiteSettings, clean=False) -> BuildReport:
    return SiteBuilder(settings).build(clean=clean)
