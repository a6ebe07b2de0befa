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

import logging
from pathlib import Path

import minify_html
import rcssmin
import rjsmin

logger = logging.getLogger(__name__)


def minify_html_text(html: str) -> str:
    """Collapse whitespace, drop comments and minify inline CSS/JS."""
    return minify_html.minify(html, minify_css=True, minify_js=True, keep_comments=False)


def minify_css_text(css: str) -> str:
    return rcssmin.cssmin(css)


def minify_js_text(js: str) -> str:
    return rjsmin.jsmin(js)


MINIFIERS = {
    ".html": minify_html_text,
    ".css": minify_css_text,
    ".js": minify_js_text,
}


def minify_file(path: Path) -> bool:
    """
    Minify one file in place if its type is supported.

    Returns:
        bool: True if the file was rewritten
    """
    minifier = MINIFIERS.get(path.suffix.lower())
    if minifier is None:
        return False
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        logger.warning("Skipping minification of %s: not UTF-8 (%s)", path, exc.reason)
        return False
    path.write_text(minifier(text), encoding="utf-8")
    logger.info("Minified %s", path)
    return True


def minify_tree(root: Path) -> int:
    """
    Minify every HTML, CSS and JS file under `root`.

    Returns:
        int: Number of files rewritten
    """
    count = 0
    for path in sorted(root.rglob("*")):
        if path.is_file() and minify_file(path):
            count += 1
    return count
