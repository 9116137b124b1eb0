"""
auteur.optics - Camera presets derived from director profiles.

Reads a director's visual mandate (lens, texture, lighting and colour notes)
and style vector, and derives a starting camera/lighting template for the
optics suite. Keyword matching is case-insensitive; the first matching rule
wins.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from typing import Any

from auteur.catalog import DirectorProfile
from auteur.classify import EmotionTier

FOCAL_RANGE_RE = re.compile(r"(\d+)(?:[–-](\d+))?mm")

DEFAULT_FOCAL_LENGTH = 50
MIN_FOCAL_LENGTH = 12
MAX_FOCAL_LENGTH = 200

RIG_LABELS = {
    "static": "Static",
    "steadicam": "Glide",
    "handheld": "Shaky",
    "crane-sweep": "Sweep",
    "dolly-push": "Push",
}


@dataclass(frozen=True)
class CameraTemplate:
    id: str
    label: str
    subtitle: str
    sensor: str
    lens: str
    focal_length: int
    aperture: str
    lighting_setup: str
    color_temp: int
    rigging: str
    shutter_angle: str
    textures: tuple[str, ...]
    performance_style: str
    action_intensity: str
    emotions: dict[str, int] = field(default_factory=dict)
    movement_speed: int = 0
    focus_softness: int = 0

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["textures"] = list(self.textures)
        return data


def _first_match(text: str, rules: list[tuple[tuple[str, ...], str]], default: str) -> str:
    for keywords, value in rules:
        if any(k in text for k in keywords):
            return value
    return default


def parse_focal_length(lens_notes: str) -> int:
    """Mean of the first ``NN-NNmm`` (or ``NNmm``) range, clamped to 12-200."""
    m = FOCAL_RANGE_RE.search(lens_notes)
    if not m:
        return DEFAULT_FOCAL_LENGTH
    low = int(m.group(1))
    high = int(m.group(2) or m.group(1))
    # halves round up
    focal = int((low + high) / 2 + 0.5)
    return max(MIN_FOCAL_LENGTH, min(MAX_FOCAL_LENGTH, focal))


def derive_camera_template(director: DirectorProfile) -> CameraTemplate:
    """Derive a camera template from a director profile.

    Args:
        director: Catalog entry

    Returns:
        CameraTemplate with sensor, lens, lighting, rigging and performance presets
    """
    v = director.vector
    mandate = director.visual_mandate
    lens_notes = mandate.lens.lower()
    texture_notes = mandate.texture.lower()
    lighting_notes = mandate.lighting.lower()
    color_notes = (mandate.lighting + mandate.color).lower()

    lens = _first_match(
        lens_notes,
        [(("anamorphic",), "anamorphic-prime"), (("zoom",), "cine-zoom"), (("vintage",), "vintage-glass")],
        "spherical-prime",
    )
    sensor = _first_match(
        texture_notes,
        [(("film", "35mm", "grain"), "kodak-vision3"), (("imax",), "red-v-raptor")],
        "arri-alexa-35",
    )
    lighting_setup = _first_match(
        lighting_notes,
        [
            (("chiaroscuro", "dramatic"), "chiaroscuro"),
            (("high-key", "bright"), "high-key"),
            (("low-key", "dark"), "low-key"),
            (("backlit", "rim"), "backlit"),
            (("rembrandt",), "rembrandt"),
        ],
        "three-point",
    )
    if any(k in color_notes for k in ("tungsten", "warm", "amber", "golden")):
        color_temp = 3400
    elif any(k in color_notes for k in ("cool", "steel", "blue")):
        color_temp = 5600
    else:
        color_temp = 4400
    rigging = _first_match(
        lens_notes,
        [
            (("steadicam",), "steadicam"),
            (("handheld",), "handheld"),
            (("crane",), "crane-sweep"),
            (("dolly", "track"), "dolly-push"),
        ],
        "static",
    )

    textures = []
    if any(k in texture_notes for k in ("grain", "film", "celluloid")):
        textures.append("grain")
    if any(k in texture_notes for k in ("halation", "diffusion")) or "diffusion" in lens_notes:
        textures.append("promist")

    tier = director.emotional_depth
    if tier is EmotionTier.OPERATIC:
        performance_style = "heightened"
    elif tier is EmotionTier.COOL:
        performance_style = "choreographed"
    else:
        performance_style = "naturalistic"

    intensity = (v.spectacle + v["darkness"]) / 2 if "darkness" in v else v.spectacle
    if intensity >= 8:
        action_intensity = "explosive"
    elif intensity >= 6:
        action_intensity = "intense"
    elif intensity >= 4:
        action_intensity = "moderate"
    else:
        action_intensity = "subtle"

    darkness = v.get("darkness", 5.0)
    emotions = {
        "intensity": round(v.emotion * 10),
        "humor": 40 if v.genre_fluidity >= 7 and darkness <= 4 else 0,
        "sadness": round((darkness - 4) * 15) if darkness >= 7 else 0,
        "joy": round((v.emotion - 4) * 15) if v.emotion >= 7 and darkness <= 4 else 0,
        "anger": 30 if darkness >= 6 and v.spectacle >= 6 else 0,
        "fear": round((darkness - 5) * 15) if darkness >= 7 else 0,
    }

    movement_speed = {"static": 0, "handheld": 60, "steadicam": 40}.get(rigging, 50)
    if lens == "vintage-glass":
        focus_softness = 40
    elif "diffusion" in lens_notes:
        focus_softness = 30
    else:
        focus_softness = 0

    visual = v.get("visual", 0.0)
    return CameraTemplate(
        id=director.id,
        label=f"{director.short_name} {RIG_LABELS[rigging]}",
        subtitle=director.name,
        sensor=sensor,
        lens=lens,
        focal_length=parse_focal_length(mandate.lens),
        aperture="T/2" if visual >= 8 else "T/2.8",
        lighting_setup=lighting_setup,
        color_temp=color_temp,
        rigging=rigging,
        shutter_angle="180" if v.spectacle >= 8 else "45" if visual >= 9 else "180",
        textures=tuple(textures),
        performance_style=performance_style,
        action_intensity=action_intensity,
        emotions=emotions,
        movement_speed=movement_speed,
        focus_softness=focus_softness,
    )
