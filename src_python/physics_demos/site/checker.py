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

"""Project quality checks for the site content tree."""

import json
import logging
import re
from pathlib import Path

from ..demos import DEMOS

logger = logging.getLogger(__name__)

REQUIRED_DIRS = ["data", "demos", "templates", "public", "dist"]

REQUIRED_FILES = [
    "data/navigation.json",
    "templates/layout.html",
    "templates/navigation.html",
    "templates/breadcrumb.html",
    "templates/footer.html",
    "templates/index.html",
    "templates/category.html",
]

REQUIRED_DEMO_FILES = ["demo.json", "demo.html", "demo.css"]

REQUIRED_DEMO_FIELDS = ["title", "description", "url"]

VAR_DECLARATION = re.compile(r"\bvar\s+\w+\s*=")


class ProjectChecker:
    """
    Checks the layout and conventions of a site content tree.

    Problems that break the build are errors; style and completeness
    issues are warnings. Only errors make the check fail.

    Attributes:
        root (Path): Project root
        errors (list): Error messages
        warnings (list): Warning messages
    """

    def __init__(self, root):
        self.root = Path(root)
        self.errors = []
        self.warnings = []

    def _rel(self, path):
        return path.relative_to(self.root).as_posix()

    def check_directory_structure(self):
        for name in REQUIRED_DIRS:
            if not (self.root / name).is_dir():
                self.warnings.append(f"Missing directory: {name}")

    def check_required_files(self):
        for name in REQUIRED_FILES:
            if not (self.root / name).exists():
                self.errors.append(f"Missing required file: {name}")

    def check_demo_modules(self):
        demos_dir = self.root / "demos"
        if not demos_dir.is_dir():
            self.warnings.append("demos directory does not exist")
            return

        for demo_dir in sorted(p for p in demos_dir.iterdir() if p.is_dir()):
            for name in REQUIRED_DEMO_FILES:
                if not (demo_dir / name).exists():
                    self.warnings.append(f"Missing demo file: demos/{demo_dir.name}/{name}")
            self.check_demo_config(demo_dir)

    def check_demo_config(self, demo_dir):
        config_path = demo_dir / "demo.json"
        if not config_path.exists():
            return
        where = f"demos/{demo_dir.name}/demo.json"

        try:
            config = json.loads(config_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            self.errors.append(f"Malformed demo config: {where} -> {exc}")
            return
        if not isinstance(config, dict):
            self.errors.append(f"Malformed demo config: {where} -> expected an object")
            return

        for name in REQUIRED_DEMO_FIELDS:
            if not config.get(name):
                self.warnings.append(f"Missing demo config field: {where} -> {name}")

        url = config.get("url")
        if url and not str(url).startswith("/"):
            self.errors.append(f"Invalid demo URL: {where} -> URL must start with /")

        slug = config.get("demo")
        if slug and slug not in DEMOS:
            self.warnings.append(f"Unknown demo: {where} -> {slug}")

    def check_code_style(self):
        self.check_templates()
        self.check_css_files()
        self.check_js_files()

    def check_templates(self):
        """Template lines must be indented by an even number of spaces."""
        templates_dir = self.root / "templates"
        if not templates_dir.is_dir():
            return
        for path in sorted(templates_dir.glob("*.html")):
            for number, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
                indent = len(line) - len(line.lstrip(" "))
                if indent % 2:
                    self.warnings.append(f"Inconsistent template indentation: {self._rel(path)}:{number}")

    def _files(self, suffix):
        for top in ("demos", "public"):
            base = self.root / top
            if base.is_dir():
                yield from sorted(base.rglob(f"*{suffix}"))

    def _read(self, path):
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            self.warnings.append(f"File is not UTF-8: {self._rel(path)}")
            return ""

    def check_css_files(self):
        for path in self._files(".css"):
            if "!important" in self._read(path):
                self.warnings.append(f"!important used in CSS: {self._rel(path)}")

    def check_js_files(self):
        for path in self._files(".js"):
            if "node_modules" in path.parts:
                continue
            if VAR_DECLARATION.search(self._read(path)):
                self.warnings.append(f"var declaration in JS: {self._rel(path)}")

    def run_all_checks(self):
        """
        Run every check and log the results.

        Returns:
            bool: True if no errors were found
        """
        self.errors = []
        self.warnings = []
        logger.info("Checking project at %s", self.root)

        self.check_directory_structure()
        self.check_required_files()
        self.check_demo_modules()
        self.check_code_style()

        for error in self.errors:
            logger.error("%s", error)
        for warning in self.warnings:
            logger.warning("%s", warning)
        logger.info("Check result: %d errors, %d warnings", len(self.errors), len(self.warnings))

        return not self.errors
