"""Unit tests for sitemap.xml generation."""

import xml.etree.ElementTree as ET
from datetime import date

from physics_demos.site.sitemap import SITEMAP_NS, SitemapEntry, build_sitemap, write_sitemap

NS = {"sm": SITEMAP_NS}


def parse(xml):
    return ET.fromstring(xml.encode("utf-8"))


def test_entries_priorities_and_dedupe():
    entries = [
        SitemapEntry("/", kind="home", changefreq="daily"),
        SitemapEntry("/optics", kind="category"),
        SitemapEntry("/optics/convex-lens"),
        SitemapEntry("/optics/convex-lens"),
    ]
    xml = build_sitemap("https://example.org", entries, lastmod=date(2024, 1, 2))

    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    urls = parse(xml).findall("sm:url", NS)
    assert [u.findtext("sm:loc", namespaces=NS) for u in urls] == [
        "https://example.org",
        "https://example.org/optics",
        "https://example.org/optics/convex-lens",
    ]
    assert [u.findtext("sm:priority", namespaces=NS) for u in urls] == ["1.0", "0.8", "0.6"]
    assert urls[0].findtext("sm:changefreq", namespaces=NS) == "daily"
    assert {u.findtext("sm:lastmod", namespaces=NS) for u in urls} == {"2024-01-02"}


def test_write_sitemap_creates_parent(tmp_path):
    path = write_sitemap(tmp_path / "dist" / "sitemap.xml", "https://example.org", [SitemapEntry("/")])
    assert path.exists()
    assert len(parse(path.read_text(encoding="utf-8")).findall("sm:url", NS)) == 1
