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

"""Geometric optics models: thin lenses and flat refracting interfaces."""

from .refraction import Interface, RefractionResult
from .thin_lens import LensImage, ThinLens, trace_principal_rays

__all__ = ['Interface', 'LensImage', 'RefractionResult', 'ThinLens', 'trace_principal_rays']
