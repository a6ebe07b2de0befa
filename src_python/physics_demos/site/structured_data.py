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

"""schema.org JSON-LD documents embedded in every page head."""

import json


def _website(settings, with_publisher=False):
    site = {
        "@type": "WebSite",
        "name": settings.site_name,
        "url": settings.site_url,
    }
    if with_publisher:
        site["description"] = settings.site_description
        site["publisher"] = {
            "@type": "Organization",
            "name": settings.site_name,
            "url": settings.site_url,
        }
    return site


def web_page(settings, title, description, url=None):
    """WebPage document for the home page and category pages."""
    return {
        "@context": "https://schema.org",
        "@type": "WebPage",
        "name": title,
        "description": description,
        "url": settings.absolute_url(url),
        "inLanguage": settings.language,
        "isPartOf": _website(settings, with_publisher=True),
        "breadcrumb": {
            "@type": "BreadcrumbList",
            "itemListElement": [],
        },
    }


def learning_resource(settings, demo, crumbs):
    """
    LearningResource document for a demo page.

    Args:
        settings (SiteSettings): Site metadata
        demo (DemoConfig): The demo's configuration
        crumbs (list): Crumb trail, turned into a 1-based BreadcrumbList
    """
    return {
        "@context": "https://schema.org",
        "@type": "LearningResource",
        "name": demo.title,
        "description": demo.description,
        "url": settings.absolute_url(demo.url),
        "inLanguage": settings.language,
        "educationalLevel": "初中|高中|大学",
        "learningResourceType": "Interactive Simulation",
        "about": {
            "@type": "Thing",
            "name": "物理学",
        },
        "isPartOf": _website(settings),
        "breadcrumb": {
            "@type": "BreadcrumbList",
            "itemListElement": [
                {
                    "@type": "ListItem",
                    "position": index,
                    "name": crumb.title,
                    "item": f"{settings.site_url}{crumb.url}",
                }
                for index, crumb in enumerate(crumbs, start=1)
            ],
        },
    }


def to_script_json(document):
    """Serialize for a <script type="application/ld+json"> block."""
    text = json.dumps(document, ensure_ascii=False, indent=2)
    # Keep the payload from closing the surrounding script element
    return text.replace("</", "<\\/")
