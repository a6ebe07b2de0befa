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
Small geometry helpers.

Points are plain dicts with 'x' and 'y' keys, the same representation
used by Ray and the SVG renderer.
"""

import math


def point(x, y):
    """Create a point dict."""
    return {'x': x, 'y': y}


def to_rad(degrees):
    return degrees * math.pi / 180


def to_deg(radians):
    return radians * 180 / math.pi


def is_finite_point(p):
    return math.isfinite(p['x']) and math.isfinite(p['y'])


def polar_offset(center, radius, angle_from_up, below=False):
    """
    Point at `radius` from `center`, measured from the upward (or downward)
    vertical toward +x, in SVG screen coordinates (y grows downward).
    """
    dy = radius * math.cos(angle_from_up)
    return point(
        center['x'] + radius * math.sin(angle_from_up),
        center['y'] + dy if below else center['y'] - dy
    )


def arc_path(radius, start, end, sweep):
    """
    Build an SVG path for a circular arc.

    Args:
        radius (float): Arc radius
        start (dict): Start point
        end (dict): End point
        sweep (int): SVG sweep flag (0 = counter-clockwise, 1 = clockwise)

    Returns:
        str: Path data string
    """
    return (f"M{start['x']},{start['y']} "
            f"A{radius},{radius} 0 0 {sweep} {end['x']},{end['y']}")
