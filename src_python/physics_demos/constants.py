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

"""
Constants shared by the physics models and the demo controllers.

Physical values are SI unless noted. Canvas values are SVG user units
(pixels) and match the layout of the published demo pages.
"""

# Gravitational acceleration (m/s^2)
GRAVITY = 9.8

# Densities (kg/m^3)
STEEL_DENSITY = 7800
WATER_DENSITY = 1000

# Drag coefficient of a smooth sphere
SPHERE_DRAG_COEFFICIENT = 0.47

# Refractive indices
AIR_REFRACTIVE_INDEX = 1.0
WATER_REFRACTIVE_INDEX = 1.33

# Object distance closer than this to the focal length images at infinity
LENS_PARALLEL_TOLERANCE = 0.1

# Images farther than this from the lens are not drawn
LENS_MAX_IMAGE_DISTANCE = 2000

# Tolerance used when classifying |m| == 1
MAGNIFICATION_TOLERANCE = 1e-9

# Default canvas
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 500

# Stroke colors used across demos
OBJECT_COLOR = '#2980b9'
IMAGE_COLOR = '#e74c3c'
RAY_COLOR = '#f39c12'
LENS_COLOR = '#3498db'
