"""Builder presets and dict/JSON serialization.

Presets are immutable value objects; look them up by name with the
``get_*_preset`` helpers or load custom ones from JSON.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import TypeVar

from xformkit.config.values import AffineValues, OrthoValues, PerspectiveValues

logger = logging.getLogger(__name__)

T = TypeVar("T")

# ============================================================================
# Affine Presets
# ============================================================================

IDENTITY = AffineValues()

FLIP_X = AffineValues.from_scale(-1.0, 1.0)
FLIP_Y = AffineValues.from_scale(1.0, -1.0)

ROTATE_90 = AffineValues.from_rotation(90.0)
ROTATE_180 = AffineValues.from_rotation(180.0)
ROTATE_270 = AffineValues.from_rotation(270.0)

DOUBLE_SIZE = AffineValues.from_scale(2.0)
HALF_SIZE = AffineValues.from_scale(0.5)

# ============================================================================
# Projection Presets
# ============================================================================

DEFAULT_PERSPECTIVE = PerspectiveValues()
WIDE_ANGLE = PerspectiveValues(fovy=90.0)
TELEPHOTO = PerspectiveValues(fovy=20.0, near=1.0, far=1000.0)

UNIT_ORTHO = OrthoValues()

# ============================================================================
# Preset Registry
# ============================================================================

TRANSFORM_PRESETS: dict[str, AffineValues] = {
    "identity": IDENTITY,
    "flip_x": FLIP_X,
    "flip_y": FLIP_Y,
    "rotate_90": ROTATE_90,
    "rotate_180": ROTATE_180,
    "rotate_270": ROTATE_270,
    "double_size": DOUBLE_SIZE,
    "half_size": HALF_SIZE,
}

PERSPECTIVE_PRESETS: dict[str, PerspectiveValues] = {
    "default": DEFAULT_PERSPECTIVE,
    "wide_angle": WIDE_ANGLE,
    "telephoto": TELEPHOTO,
}

ORTHO_PRESETS: dict[str, OrthoValues] = {
    "unit": UNIT_ORTHO,
}

# ============================================================================
# Loading Functions
# ============================================================================


def _lookup(registry: dict[str, T], kind: str, name: str) -> T:
    name_lower = name.lower()
    if name_lower not in registry:
        available = ", ".join(registry.keys())
        raise KeyError(f"Unknown {kind} preset '{name}'. Available: {available}")
    return registry[name_lower]


def get_transform_preset(name: str) -> AffineValues:
    """Get affine transform preset by name.

    :param name: Preset name (case-insensitive)
    :returns: AffineValues preset
    :raises KeyError: If preset not found
    """
    return _lookup(TRANSFORM_PRESETS, "transform", name)


def get_perspective_preset(name: str) -> PerspectiveValues:
    """Get perspective preset by name (case-insensitive).

    :raises KeyError: If preset not found
    """
    return _lookup(PERSPECTIVE_PRESETS, "perspective", name)


def get_ortho_preset(name: str) -> OrthoValues:
    """Get orthographic preset by name (case-insensitive).

    :raises KeyError: If preset not found
    """
    return _lookup(ORTHO_PRESETS, "ortho", name)


# ============================================================================
# Dict/JSON Loading
# ============================================================================


def _known_fields(cls: type, d: dict) -> dict:
    valid_fields = {f.name for f in fields(cls)}
    return {k: float(v) for k, v in d.items() if k in valid_fields}


def affine_from_dict(d: dict) -> AffineValues:
    """Create AffineValues from dictionary.

    Supports both direct field assignment and factory method syntax.
    Unknown keys are ignored.

    Example:
        >>> # Direct
        >>> values = affine_from_dict({"x": 5.0, "angle": 30.0})

        >>> # Factory method
        >>> values = affine_from_dict({"from_scale": [2.0, 3.0]})
    """
    if "from_translation" in d:
        return AffineValues.from_translation(*d["from_translation"])
    if "from_rotation" in d:
        return AffineValues.from_rotation(d["from_rotation"])
    if "from_rotation_rad" in d:
        return AffineValues.from_rotation_rad(d["from_rotation_rad"])
    if "from_scale" in d:
        args = d["from_scale"]
        if isinstance(args, int | float):
            return AffineValues.from_scale(args)
        return AffineValues.from_scale(*args)
    if "from_skew" in d:
        return AffineValues.from_skew(*d["from_skew"])

    return AffineValues(**_known_fields(AffineValues, d))


def perspective_from_dict(d: dict) -> PerspectiveValues:
    """Create PerspectiveValues from dictionary; missing keys keep defaults."""
    return PerspectiveValues(**_known_fields(PerspectiveValues, d))


def ortho_from_dict(d: dict) -> OrthoValues:
    """Create OrthoValues from dictionary.

    Accepts either the six plane coordinates or ``from_size: [w, h]``.
    """
    if "from_size" in d:
        return OrthoValues.from_size(*d["from_size"])
    return OrthoValues(**_known_fields(OrthoValues, d))


def _load_json(path: str | Path) -> dict:
    with open(path) as f:
        d = json.load(f)
    logger.debug("Loaded preset from %s", path)
    return d


def load_affine_json(path: str | Path) -> AffineValues:
    """Load AffineValues from JSON file.

    :param path: Path to JSON file
    :returns: AffineValues instance
    """
    return affine_from_dict(_load_json(path))


def load_perspective_json(path: str | Path) -> PerspectiveValues:
    return perspective_from_dict(_load_json(path))


def load_ortho_json(path: str | Path) -> OrthoValues:
    return ortho_from_dict(_load_json(path))


# ============================================================================
# Saving Functions
# ============================================================================


def affine_to_dict(values: AffineValues) -> dict:
    """Convert AffineValues to dictionary.

    :param values: AffineValues instance
    :returns: Dictionary with all nine fields
    """
    return asdict(values)


def perspective_to_dict(values: PerspectiveValues) -> dict:
    return asdict(values)


def ortho_to_dict(values: OrthoValues) -> dict:
    return asdict(values)


def _save_json(d: dict, path: str | Path) -> None:
    with open(path, "w") as f:
        json.dump(d, f, indent=2)
    logger.debug("Saved preset to %s", path)


def save_affine_json(values: AffineValues, path: str | Path) -> None:
    """Save AffineValues to JSON file.

    :param values: AffineValues instance
    :param path: Output path
    """
    _save_json(affine_to_dict(values), path)


def save_perspective_json(values: PerspectiveValues, path: str | Path) -> None:
    _save_json(perspective_to_dict(values), path)


def save_ortho_json(values: OrthoValues, path: str | Path) -> None:
    _save_json(ortho_to_dict(values), path)
