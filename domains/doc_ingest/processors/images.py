"""
Asset processing for the documentation site.

Raster images are shrunk to fit a bounding box, GIF animations are
transcoded to animated WebP, and everything else is copied byte for byte.
"""

import shutil
from pathlib import Path
from typing import Iterable

from loguru import logger
from PIL import Image, ImageSequence

ANIMATION_SOURCE_SUFFIX = ".gif"
ANIMATION_TARGET_SUFFIX = ".webp"
DEFAULT_FRAME_DURATION = 100  # ms
PLAY_ONCE = 1


def asset_target_name(name: str) -> str:
    """Output file name of an asset; GIFs change extension to .webp."""
    path = Path(name)
    if path.suffix.lower() == ANIMATION_SOURCE_SUFFIX:
        return path.stem + ANIMATION_TARGET_SUFFIX
    return name


def resize_image(source: Path, target: Path, max_size: tuple[int, int]):
    """
    Shrink an image to fit within ``max_size`` keeping its aspect ratio.

    Smaller images are written at their original size.
    """
    with Image.open(source) as img:
        image_format = img.format
        img.thumbnail(max_size, Image.Resampling.LANCZOS)
        img.save(target, format=image_format)


def transcode_animation(source: Path, target: Path, max_size: tuple[int, int]):
    """
    Transcode a (possibly animated) GIF into an animated WebP.

    Every frame is shrunk to fit ``max_size``; frame durations and the loop
    count are carried over.
    """
    frames = []
    durations = []

    with Image.open(source) as img:
        # Without a loop extension a GIF plays once
        loop = img.info.get("loop", PLAY_ONCE)
        for frame in ImageSequence.Iterator(img):
            converted = frame.convert("RGBA")
            converted.thumbnail(max_size, Image.Resampling.LANCZOS)
            frames.append(converted)
            durations.append(frame.info.get("duration", DEFAULT_FRAME_DURATION))

    frames[0].save(
        target,
        format="WEBP",
        save_all=True,
        append_images=frames[1:],
        duration=durations,
        loop=loop,
    )


def process_asset(
    source: Path,
    target: Path,
    max_size: tuple[int, int],
    image_extensions: Iterable[str],
) -> Path:
    """
    Process and copy one asset.

    Args:
        source: Asset file in the project tree
        target: Destination path under its original name
        max_size: Bounding box for raster images
        image_extensions: Lowercase suffixes treated as images

    Returns:
        Path actually written
    """
    ext = source.suffix.lower()

    if ext not in set(image_extensions):
        shutil.copyfile(source, target)
        logger.debug(f"Copied asset {source} to {target}")
        return target

    output = target.with_name(asset_target_name(target.name))

    try:
        if ext == ANIMATION_SOURCE_SUFFIX:
            transcode_animation(source, output, max_size)
        else:
            resize_image(source, output, max_size)

        logger.info(f"Processed and copied image {source} to {output}")
        return output

    except Exception as e:
        logger.error(f"Error processing image {source}: {e}")
        if output != target:
            output.unlink(missing_ok=True)

        # Fall back to the untouched bytes
        shutil.copyfile(source, target)
        return target
