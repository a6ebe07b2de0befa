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
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

from ..exceptions import SiteBuildError

logger = logging.getLogger(__name__)


class NavItem(BaseModel):
    """One entry of the site menu; categories carry their demos as subitems."""

    title: str
    url: str
    active: bool = False
    subitems: List["NavItem"] = Field(default_factory=list)


class Navigation(BaseModel):
    items: List[NavItem] = Field(default_factory=list)


class Crumb(BaseModel):
    title: str
    url: str


def load_navigation(path: Path) -> Navigation:
    """
    Read navigation.json.

    A missing file yields an empty menu; a malformed one is a build error.
    """
    if not path.exists():
        logger.warning("Navigation file not found: %s", path)
        return Navigation()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return Navigation.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise SiteBuildError(f"Invalid navigation file {path}: {exc}") from exc


def set_active(navigation: Navigation, current_path: str) -> Navigation:
    """
    Mark the item at `current_path` and all its ancestors active.

    Returns a copy; the input navigation is left untouched.
    """
    nav = navigation.model_copy(deep=True)

    def reset(items):
        for item in items:
            item.active = False
            reset(item.subitems)

    def mark(items):
        for item in items:
            if item.url == current_path or mark(item.subitems):
                item.active = True
                return True
        return False

    reset(nav.items)
    mark(nav.items)
    return nav


def _find_trail(items, path, trail) -> Optional[List[Crumb]]:
    for item in items:
        crumbs = trail + [Crumb(title=item.title, url=item.url)]
        if item.url == path:
            return crumbs
        found = _find_trail(item.subitems, path, crumbs)
        if found:
            return found
    return None


def breadcrumb(navigation: Navigation, current_path: str, home_title: str = "首页") -> List[Crumb]:
    """
    Breadcrumb trail from the home page to `current_path`.

    Paths missing from the menu get a single crumb named after their last
    path segment.
    """
    crumbs = [Crumb(title=home_title, url="/")]
    trail = _find_trail(navigation.items, current_path, [])
    if trail:
        crumbs.extend(trail)
    elif current_path != "/":
        parts = [part for part in current_path.split("/") if part]
        if parts:
            crumbs.append(Crumb(title=parts[-1], url=current_path))
    return crumbs
