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

"""Registry of the interactive demos, keyed by slug."""

from ..exceptions import UnknownDemoError
from .base import Demo
from .falling_ball import FallingBallDemo
from .incline import FrictionInclineDemo
from .lens import ConcaveLensDemo, ConvexLensDemo
from .refraction import RefractionDemo

DEMOS = {
    cls.slug: cls
    for cls in (ConvexLensDemo, ConcaveLensDemo, RefractionDemo, FallingBallDemo, FrictionInclineDemo)
}


def available_demos():
    return sorted(DEMOS)


def get_demo(slug, **params):
    """
    Instantiate a demo by slug.

    Args:
        slug (str): Demo identifier, e.g. 'convex-lens'
        **params: Initial slider values

    Raises:
        UnknownDemoError: If no demo has this slug
    """
    try:
        cls = DEMOS[slug]
    except KeyError:
        raise UnknownDemoError(slug, available_demos()) from None
    return cls(**params)


__all__ = [
    'DEMOS',
    'Demo',
    'ConcaveLensDemo',
    'ConvexLensDemo',
    'FallingBallDemo',
    'FrictionInclineDemo',
    'RefractionDemo',
    'available_demos',
    'get_demo',
]
