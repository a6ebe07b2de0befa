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

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import date
from pathlib import Path

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

# Priority by page kind
PRIORITIES = {
    "home": "1.0",
    "category": "0.8",
    "demo": "0.6",
}


@dataclass
class SitemapEntry:
    path: str
    kind: str = "demo"
    changefreq: str = "weekly"


def build_sitemap(site_url, entries, lastmod=None):
    """
    Render a sitemap.xml document.

    Args:
        site_url (str): Absolute site URL without trailing slash
        entries (list): SitemapEntry per page; duplicates are dropped
        lastmod (date or None): Modification date (default: today)

    Returns:
        str: XML text with declaration
    """
    lastmod = (lastmod or date.today()).isoformat()
    urlset = ET.Element("urlset", xmlns=SITEMAP_NS)

    seen = set()
    for entry in entries:
        loc = site_url if entry.path in ("", "/") else site_url + entry.path
        if loc in seen:
            continue
        seen.add(loc)
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = loc
        ET.SubElement(url, "lastmod").text = lastmod
        ET.SubElement(url, "changefreq").text = entry.changefreq
        ET.SubElement(url, "priority").text = PRIORITIES.get(entry.kind, "0.5")

    ET.indent(urlset)
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(urlset, encoding="unicode") + "\n"


def write_sitemap(path: Path, site_url, entries, lastmod=None):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(build_sitemap(site_url, entries, lastmod), encoding="utf-8")
    return path
