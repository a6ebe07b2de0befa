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

import math


class Ray:
    """
    A straight light-ray segment used by the optics demos.

    Rays are produced by the optics models (principal rays of a thin lens,
    incident/reflected/transmitted rays at an interface) and consumed by
    the SVG renderer. A bent ray is represented as consecutive segments.

    Attributes:
        p1 (dict): Starting point with keys 'x' and 'y'
        p2 (dict): End point with keys 'x' and 'y'
        brightness (float): Relative intensity 0.0 to 1.0 (drives stroke width)
        virtual (bool): If True, this is a backward extension used to locate
                        a virtual image (drawn dashed)
        role (str or None): What the ray represents, e.g. 'parallel',
                            'center', 'incident', 'reflected', 'transmitted'
    """

    def __init__(self, p1, p2, brightness=1.0, virtual=False, role=None):
        """
        Initialize a ray segment.

        Args:
            p1 (dict): Starting point {'x': float, 'y': float}
            p2 (dict): End point {'x': float, 'y': float}
            brightness (float): Relative intensity (default: 1.0)
            virtual (bool): Dashed backward extension (default: False)
            role (str or None): Ray role tag (default: None)
        """
        self.p1 = p1
        self.p2 = p2
        self.brightness = brightness
        self.virtual = virtual
        self.role = role

    def copy(self):
        """
        Create a copy of this ray.

        Returns:
            Ray: A new Ray object with the same properties
        """
        return Ray(
            p1={'x': self.p1['x'], 'y': self.p1['y']},
            p2={'x': self.p2['x'], 'y': self.p2['y']},
            brightness=self.brightness,
            virtual=self.virtual,
            role=self.role
        )

    def transformed(self, fn):
        """
        Return a copy with both endpoints mapped through fn(point) -> point.

        Used to move rays from a model's coordinate system to the canvas.
        """
        new_ray = self.copy()
        new_ray.p1 = fn(self.p1)
        new_ray.p2 = fn(self.p2)
        return new_ray

    @property
    def length(self):
        return math.hypot(self.p2['x'] - self.p1['x'], self.p2['y'] - self.p1['y'])

    @property
    def angle(self):
        """Direction of travel in radians, measured from +x toward +y."""
        return math.atan2(self.p2['y'] - self.p1['y'], self.p2['x'] - self.p1['x'])

    def __repr__(self):
        """String representation for debugging."""
        return (f"Ray(p1={self.p1}, p2={self.p2}, "
                f"brightness={self.brightness:.3f}, virtual={self.virtual}, "
                f"role={self.role!r})")


# Example usage
if __name__ == "__main__":
    print("Testing Ray class...\n")

    ray1 = Ray(p1={'x': 0, 'y': 0}, p2={'x': 30, 'y': 40}, role='center')
    print(f"  {ray1}")
    print(f"  Length: {ray1.length:.1f}")
    print(f"  Angle: {math.degrees(ray1.angle):.1f} deg")

    ray2 = ray1.copy()
    ray2.p1['x'] = 10
    print(f"  Copy is independent: original p1.x={ray1.p1['x']}, copy p1.x={ray2.p1['x']}")

    flipped = ray1.transformed(lambda p: {'x': 400 + p['x'], 'y': 250 - p['y']})
    print(f"  On canvas: {flipped}")

    print("\nRay test completed successfully!")
