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
from dataclasses import dataclass

from ..constants import (
    LENS_MAX_IMAGE_DISTANCE,
    LENS_PARALLEL_TOLERANCE,
    MAGNIFICATION_TOLERANCE,
)
from ..exceptions import InvalidParameterError
from ..geometry import point
from ..ray import Ray

REAL = 'real'
VIRTUAL = 'virtual'
NO_IMAGE = 'none'

UPRIGHT = 'upright'
INVERTED = 'inverted'

ENLARGED = 'enlarged'
REDUCED = 'reduced'
SAME_SIZE = 'same'

_LABELS = {
    UPRIGHT: '正立',
    INVERTED: '倒立',
    ENLARGED: '放大',
    REDUCED: '缩小',
    SAME_SIZE: '等大',
    REAL: '实像',
    VIRTUAL: '虚像',
}


@dataclass
class LensImage:
    """Image formed by a thin lens for an object at distance u."""

    u: float
    v: float
    m: float
    nature: str
    orientation: str = None
    size: str = None

    @property
    def at_infinity(self):
        return self.nature == NO_IMAGE

    def describe(self):
        """Human-readable image type, e.g. '倒立 放大 实像'."""
        if self.at_infinity:
            return '平行光 不成像'
        return ' '.join(_LABELS[key] for key in (self.orientation, self.size, self.nature))


class ThinLens:
    """
    Ideal thin lens obeying 1/f = 1/u + 1/v (real-is-positive convention).

    Coordinates are lens-centred: the lens sits at x = 0, the optical axis
    is y = 0 with y pointing up, and objects stand on the left at x = -u.

    Attributes:
        focal_length (float): Positive for converging (convex) lenses,
                              negative for diverging (concave) lenses
    """

    def __init__(self, focal_length):
        if focal_length == 0 or not math.isfinite(focal_length):
            raise InvalidParameterError(f"Focal length must be finite and non-zero, got {focal_length}")
        self.focal_length = focal_length

    @property
    def is_converging(self):
        return self.focal_length > 0

    def _check_object_distance(self, u):
        if not u > 0:
            raise InvalidParameterError(f"Object distance must be positive, got {u}")

    def image_distance(self, u):
        """
        Solve the lens equation for the image distance.

        Args:
            u (float): Object distance (positive, object on the left)

        Returns:
            float: Image distance v; positive on the right (real), negative on
                   the left (virtual), math.inf when the object is at the focus
        """
        self._check_object_distance(u)
        f = self.focal_length
        if abs(u - f) < LENS_PARALLEL_TOLERANCE:
            return math.inf
        return (u * f) / (u - f)

    def magnification(self, u):
        v = self.image_distance(u)
        if math.isinf(v):
            return math.inf
        return -v / u

    def image(self, u):
        """
        Locate and classify the image of an object at distance u.

        Returns:
            LensImage: distance, magnification and image type
        """
        v = self.image_distance(u)
        if math.isinf(v):
            return LensImage(u=u, v=v, m=math.inf, nature=NO_IMAGE)

        m = -v / u
        if abs(abs(m) - 1) < MAGNIFICATION_TOLERANCE:
            size = SAME_SIZE
        elif abs(m) > 1:
            size = ENLARGED
        else:
            size = REDUCED

        return LensImage(
            u=u,
            v=v,
            m=m,
            nature=REAL if v > 0 else VIRTUAL,
            orientation=UPRIGHT if m > 0 else INVERTED,
            size=size
        )

    def refracted_y(self, height, x):
        """
        Height at x of a ray that entered parallel to the axis at `height`.

        After the lens the ray lies on the line through (0, height) and the
        focal point (f, 0); for a diverging lens that line extends back to
        the object-side focus.
        """
        return height - height * x / self.focal_length


def trace_principal_rays(lens, u, object_height, x_end):
    """
    Construct the two principal rays from the tip of an upright object.

    The parallel ray travels parallel to the axis, refracts at the lens and
    heads along the focal line. The centre ray passes undeviated through the
    optical centre. Real images are located where the refracted rays meet;
    virtual images are located by dashed backward extensions.

    Args:
        lens (ThinLens): The lens
        u (float): Object distance (object base at (-u, 0))
        object_height (float): Height of the object tip above the axis
        x_end (float): Abscissa at which rays leaving the scene are cut

    Returns:
        tuple: (LensImage, list of Ray segments)
    """
    image = lens.image(u)
    h = object_height
    tip = point(-u, h)
    lens_hit = point(0, h)
    center = point(0, 0)

    rays = [Ray(tip, lens_hit, role='parallel')]

    if image.at_infinity or abs(image.v) > LENS_MAX_IMAGE_DISTANCE:
        rays.append(Ray(lens_hit, point(x_end, lens.refracted_y(h, x_end)), role='parallel'))
        rays.append(Ray(tip, point(x_end, -h * x_end / u), role='center'))
        return image, rays

    image_tip = point(image.v, h * image.m)

    if image.nature == REAL:
        rays.append(Ray(lens_hit, image_tip, role='parallel'))
        rays.append(Ray(tip, center, role='center'))
        rays.append(Ray(center, image_tip, role='center'))
    else:
        rays.append(Ray(lens_hit, point(x_end, lens.refracted_y(h, x_end)), role='parallel'))
        rays.append(Ray(tip, point(x_end, -h * x_end / u), role='center'))
        rays.append(Ray(lens_hit, dict(image_tip), virtual=True, role='parallel'))
        rays.append(Ray(center, dict(image_tip), virtual=True, role='center'))

    return image, rays


# Example usage
if __name__ == "__main__":
    print("Testing ThinLens...\n")

    convex = ThinLens(100)
    for u in (300, 200, 150, 100, 50):
        img = convex.image(u)
        print(f"  convex u={u:>3}: v={img.v:8.1f}  m={img.m:6.2f}  {img.describe()}")

    concave = ThinLens(-100)
    img = concave.image(300)
    print(f"  concave u=300: v={img.v:8.1f}  m={img.m:6.2f}  {img.describe()}")

    _, rays = trace_principal_rays(convex, 50, 60, 400)
    print(f"\n  Principal rays for a virtual image ({len(rays)} segments):")
    for ray in rays:
        print(f"    {ray}")
