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


class PhysicsDemosError(Exception):
    """Base class for all errors raised by this package."""


class InvalidParameterError(PhysicsDemosError, ValueError):
    """A physical or control parameter is outside its valid range."""


class UnknownDemoError(PhysicsDemosError, KeyError):
    """No demo is registered under the requested slug."""

    def __init__(self, slug, available=()):
        self.slug = slug
        self.available = list(available)
        super().__init__(slug)

    def __str__(self):
        return f"Unknown demo: {self.slug}. Available: {self.available}"


class SiteBuildError(PhysicsDemosError):
    """Raised when the static site cannot be generated."""


class DemoConfigError(SiteBuildError):
    """A demo folder has a missing or malformed demo.json."""

    def __init__(self, path, message):
        self.path = path
        super().__init__(f"{path}: {message}")
