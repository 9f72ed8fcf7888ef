from __future__ import annotations

import colorsys
import logging
import zlib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageOps, UnidentifiedImageError

from .config import ImageConfig
from .models import Animal

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES: Tuple[str, ...] = (".png", ".jpg", ".jpeg")


class ContentMode(str, Enum):
    FIT = "fit"
    FILL = "fill"


@dataclass
class ZoomState:
    """Tap-to-zoom flag held privately by a single detail view."""

    zoomed: bool = False

    def toggle(self) -> bool:
        self.zoomed = not self.zoomed
        return self.zoomed

    @property
    def content_mode(self) -> ContentMode:
        return ContentMode.FILL if self.zoomed else ContentMode.FIT


def name_to_rgb(name: str) -> Tuple[int, int, int]:
    hue = (zlib.crc32(name.encode("utf-8")) % 360) / 360.0
    r, g, b = colorsys.hsv_to_rgb(hue, 0.45, 0.85)
    return int(r * 255), int(g * 255), int(b * 255)


def placeholder_image(label: str, size: Tuple[int, int] = (320, 240)) -> Image.Image:
    """Solid tile coloured from the label, with its first letter in the middle."""
    img = Image.new("RGBA", size, name_to_rgb(label) + (255,))
    draw = ImageDraw.Draw(img)
    text = (label[:1] or "?").upper()
    left, top, right, bottom = draw.textbbox((0, 0), text)
    x = (size[0] - (right - left)) / 2.0 - left
    y = (size[1] - (bottom - top)) / 2.0 - top
    draw.text((x, y), text, fill=(255, 255, 255, 255))
    return img


def fit_image(img: Image.Image, size: Tuple[int, int]) -> Image.Image:
    """Scale to fit inside ``size`` keeping aspect ratio, letterboxed on a transparent canvas."""
    contained = ImageOps.contain(img.convert("RGBA"), size)
    canvas = Image.new("RGBA", size, (0, 0, 0, 0))
    offset = ((size[0] - contained.width) // 2, (size[1] - contained.height) // 2)
    canvas.paste(contained, offset)
    return canvas


def fill_image(img: Image.Image, size: Tuple[int, int]) -> Image.Image:
    """Scale to cover ``size`` keeping aspect ratio, cropping the overflow."""
    return ImageOps.fit(img.convert("RGBA"), size)


def apply_content_mode(img: Image.Image, size: Tuple[int, int], mode: ContentMode) -> Image.Image:
    if mode is ContentMode.FILL:
        return fill_image(img, size)
    return fit_image(img, size)


def round_corners(img: Image.Image, radius: int) -> Image.Image:
    if radius <= 0:
        return img
    rounded = img.convert("RGBA")
    mask = Image.new("L", rounded.size, 0)
    ImageDraw.Draw(mask).rounded_rectangle((0, 0, rounded.width - 1, rounded.height - 1), radius=radius, fill=255)
    alpha = Image.new("L", rounded.size, 0)
    alpha.paste(rounded.getchannel("A"), mask=mask)
    rounded.putalpha(alpha)
    return rounded


class ImageLibrary:
    """
    Looks up animal artwork by name in an asset directory.

    ``<name>.png`` is the detail image and ``<name>Thumb.png`` the list
    thumbnail. Anything missing or unreadable is replaced by a generated
    placeholder so the UI never fails on artwork.
    """

    def __init__(
        self,
        asset_dir: Optional[Path] = None,
        *,
        thumb_size: int = 48,
        detail_size: int = 320,
        corner_radius: int = 10,
    ) -> None:
        self.asset_dir = Path(asset_dir) if asset_dir else None
        self.thumb_size = thumb_size
        self.detail_size = detail_size
        self.corner_radius = corner_radius

    @classmethod
    def from_config(cls, config: ImageConfig) -> "ImageLibrary":
        asset_dir = Path(config.asset_dir).expanduser() if config.asset_dir else None
        if asset_dir is not None and not asset_dir.is_dir():
            logger.warning("Asset directory %s not found; using generated artwork", asset_dir)
        return cls(
            asset_dir,
            thumb_size=int(config.thumb_size),
            detail_size=int(config.detail_size),
            corner_radius=int(config.corner_radius),
        )

    def find(self, image_name: str) -> Optional[Path]:
        if self.asset_dir is None:
            return None
        for suffix in IMAGE_SUFFIXES:
            candidate = self.asset_dir / f"{image_name}{suffix}"
            if candidate.is_file():
                return candidate
        return None

    def load(self, names: Sequence[str], label: str) -> Image.Image:
        for name in names:
            path = self.find(name)
            if path is None:
                continue
            try:
                with Image.open(path) as img:
                    return img.convert("RGBA")
            except (OSError, UnidentifiedImageError) as exc:
                logger.warning("Could not read image %s: %s", path, exc)
        logger.debug("No artwork for %s, using placeholder", label)
        return placeholder_image(label, (self.detail_size, self.detail_size * 3 // 4))

    def thumbnail(self, animal: Animal) -> Image.Image:
        img = self.load((animal.thumb_name, animal.image_name), animal.name)
        thumb = fill_image(img, (self.thumb_size, self.thumb_size))
        return round_corners(thumb, self.corner_radius)

    def detail(self, animal: Animal, mode: ContentMode, size: Optional[Tuple[int, int]] = None) -> Image.Image:
        box = size or (self.detail_size, self.detail_size)
        img = self.load((animal.image_name,), animal.name)
        return round_corners(apply_content_mode(img, box, mode), self.corner_radius)
