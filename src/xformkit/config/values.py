"""Builder parameter dataclasses.

Each dataclass holds the scalar inputs of one matrix builder and converts
them to a flat column-major matrix. ``AffineValues`` also supports
composition with ``+`` by round-tripping through the 3x3 matrix.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from xformkit.config.config import PROJECTION_CONFIG, TRANSFORM_CONFIG
from xformkit.matrix.api import mat33_multiply
from xformkit.projection.api import ortho, perspective
from xformkit.shared.buffers import as_buffer
from xformkit.transform.api import mat33_transformation, mat44_transformation
from xformkit.types import Buffer, Matrix


@dataclass(frozen=True)
class AffineValues:
    """2D affine transform parameters: ``Move * Rotate * Scale * Skew * Origin``.

    Convention: a + b applies a FIRST, then b.

    Example:
        >>> move = AffineValues.from_translation(10, 0)
        >>> turn = AffineValues.from_rotation(90)
        >>> composed = move + turn  # move then rotate about (0, 0)
    """

    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0  # degrees, counter-clockwise
    sx: float = 1.0
    sy: float = 1.0
    ox: float = 0.0
    oy: float = 0.0
    kx: float = 0.0
    ky: float = 0.0

    def to_mat33(self, out: Buffer | None = None) -> Buffer:
        """Convert to 3x3 column-major matrix."""
        return mat33_transformation(
            self.x,
            self.y,
            math.radians(self.angle),
            self.sx,
            self.sy,
            self.ox,
            self.oy,
            self.kx,
            self.ky,
            out=out,
        )

    def to_mat44(self, out: Buffer | None = None) -> Buffer:
        """Convert to 4x4 column-major matrix (Z passes through)."""
        return mat44_transformation(
            self.x,
            self.y,
            math.radians(self.angle),
            self.sx,
            self.sy,
            self.ox,
            self.oy,
            self.kx,
            self.ky,
            out=out,
        )

    @classmethod
    def from_mat33(cls, m: Matrix) -> AffineValues:
        """Decompose a 3x3 affine matrix.

        The result has ``ky = 0`` and a zero origin; any affine matrix whose
        first column is non-zero has such a form. The bottom row is ignored.

        :param m: Column-major 3x3 matrix [9]
        :returns: AffineValues reproducing ``m``
        """
        m = as_buffer(m, 9, "m")
        a, b = float(m[0]), float(m[1])
        c, d = float(m[3]), float(m[4])
        tx, ty = float(m[6]), float(m[7])

        sx = math.hypot(a, b)
        if sx > 1e-12:
            cos_t = a / sx
            sin_t = b / sx
            kx = (cos_t * c + sin_t * d) / sx
            sy = cos_t * d - sin_t * c
            angle = math.degrees(math.atan2(b, a))
        else:
            # Collapsed X axis: keep what the second column says
            sx = 0.0
            kx = 0.0
            sy = math.hypot(c, d)
            angle = math.degrees(math.atan2(-c, d)) if sy > 1e-12 else 0.0

        return cls(x=tx, y=ty, angle=angle, sx=sx, sy=sy, kx=kx)

    def __add__(self, other: AffineValues) -> AffineValues:
        """Compose transforms: self applied FIRST, then other."""
        if not isinstance(other, AffineValues):
            return NotImplemented

        return AffineValues.from_mat33(mat33_multiply(other.to_mat33(), self.to_mat33()))

    def __radd__(self, other):
        """Support sum() with initial value 0."""
        if other == 0:
            return self
        return other.__add__(self)

    def is_neutral(self) -> bool:
        """Check if this is the identity transform.

        With the linear part neutral the translation is ``(x - ox, y - oy)``,
        so an origin offset alone is not neutral.
        """
        cfg = TRANSFORM_CONFIG
        return (
            cfg.translation.is_neutral(self.x - self.ox)
            and cfg.translation.is_neutral(self.y - self.oy)
            and cfg.angle.is_neutral(self.angle)
            and cfg.scale.is_neutral(self.sx)
            and cfg.scale.is_neutral(self.sy)
            and cfg.skew.is_neutral(self.kx)
            and cfg.skew.is_neutral(self.ky)
        )

    def clamp(self) -> AffineValues:
        """Return a copy with every field clamped to its configured range.

        :raises ValueError: If a field is not a number
        """
        cfg = TRANSFORM_CONFIG
        return AffineValues(
            x=cfg.translation.validate(self.x),
            y=cfg.translation.validate(self.y),
            angle=cfg.angle.validate(self.angle),
            sx=cfg.scale.validate(self.sx),
            sy=cfg.scale.validate(self.sy),
            ox=cfg.origin.validate(self.ox),
            oy=cfg.origin.validate(self.oy),
            kx=cfg.skew.validate(self.kx),
            ky=cfg.skew.validate(self.ky),
        )

    def with_origin(self, ox: float, oy: float) -> AffineValues:
        """Same transform anchored at ``(ox, oy)``; that point maps to ``(x, y)``."""
        return replace(self, ox=ox, oy=oy)

    # Factory methods
    @classmethod
    def from_translation(cls, x: float, y: float) -> AffineValues:
        return cls(x=x, y=y)

    @classmethod
    def from_rotation(cls, angle: float) -> AffineValues:
        """Create rotation about the origin.

        :param angle: Counter-clockwise angle in degrees
        """
        return cls(angle=angle)

    @classmethod
    def from_rotation_rad(cls, angle: float) -> AffineValues:
        """Create rotation about the origin with the angle in radians."""
        return cls(angle=math.degrees(angle))

    @classmethod
    def from_scale(cls, sx: float, sy: float | None = None) -> AffineValues:
        """Create scale transform; uniform when ``sy`` is omitted."""
        return cls(sx=sx, sy=sx if sy is None else sy)

    @classmethod
    def from_skew(cls, kx: float, ky: float = 0.0) -> AffineValues:
        return cls(kx=kx, ky=ky)


@dataclass(frozen=True)
class PerspectiveValues:
    """Symmetric perspective projection parameters.

    Example:
        >>> proj = PerspectiveValues(fovy=45.0, aspect=16 / 9).to_matrix()
    """

    fovy: float = 60.0  # degrees
    aspect: float = 1.0
    near: float = 0.1
    far: float = 100.0

    def to_matrix(self, out: Buffer | None = None) -> Buffer:
        """Convert to 4x4 column-major projection matrix."""
        return perspective(self.fovy, self.aspect, self.near, self.far, out=out)

    def clamp(self) -> PerspectiveValues:
        """Return a copy with every field clamped to its configured range."""
        cfg = PROJECTION_CONFIG
        return PerspectiveValues(
            fovy=cfg.fovy.validate(self.fovy),
            aspect=cfg.aspect.validate(self.aspect),
            near=cfg.near.validate(self.near),
            far=cfg.far.validate(self.far),
        )


@dataclass(frozen=True)
class OrthoValues:
    """Orthographic projection box.

    The default box is the canonical clip cube, which maps to
    ``diag(1, 1, -1, 1)``.
    """

    left: float = -1.0
    right: float = 1.0
    bottom: float = -1.0
    top: float = 1.0
    near: float = -1.0
    far: float = 1.0

    def to_matrix(self, out: Buffer | None = None) -> Buffer:
        """Convert to 4x4 column-major projection matrix."""
        return ortho(self.left, self.right, self.bottom, self.top, self.near, self.far, out=out)

    def clamp(self) -> OrthoValues:
        spec = PROJECTION_CONFIG.extent
        return OrthoValues(
            left=spec.validate(self.left),
            right=spec.validate(self.right),
            bottom=spec.validate(self.bottom),
            top=spec.validate(self.top),
            near=spec.validate(self.near),
            far=spec.validate(self.far),
        )

    @classmethod
    def from_size(
        cls, width: float, height: float, near: float = -1.0, far: float = 1.0
    ) -> OrthoValues:
        """Box centered on the origin with the given width and height."""
        hw = width * 0.5
        hh = height * 0.5
        return cls(left=-hw, right=hw, bottom=-hh, top=hh, near=near, far=far)
