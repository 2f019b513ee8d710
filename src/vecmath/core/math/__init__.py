"""Math utilities namespace."""

from .angles import TWO_PI, from_angle, random_2d, random_3d  # noqa: F401
from .vector3 import (  # noqa: F401
    Vector3,
    add,
    angle_between,
    copy,
    cross,
    dist,
    div,
    dot,
    heading,
    lerp,
    limit,
    mag,
    mag_sq,
    mult,
    normalize,
    rotate,
    set_heading,
    set_mag,
    sub,
)
