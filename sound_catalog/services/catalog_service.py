import os
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import structlog

from sound_catalog.models.sound import Sound

log = structlog.get_logger()

AUDIO_EXTENSION = ".mp3"
DESCRIPTION_EXTENSION = ".txt"
COVER_EXTENSION = ".jpg"

AUDIO_ROUTE = "/audio"
COVER_ROUTE = "/cover"


class ServiceError(Exception):
    pass


class SidecarError(ServiceError):
    pass


def derive_title(file_name: str) -> str:
    """
    Turn an audio file name into a display title.

    Only the first underscore becomes a space: ``a_b_c.mp3`` gives ``"A B_c"``.
    Words are split on single spaces, so empty words survive the join.
    """
    stem = file_name.replace(AUDIO_EXTENSION, "", 1).replace("_", " ", 1)
    return " ".join(word[:1].upper() + word[1:] for word in stem.split(" "))


def parse_sidecar(text: str, source: str = "<sidecar>") -> Tuple[str, List[str]]:
    """Return ``(description, tags)`` from the first two lines of a sidecar file."""
    lines = text.split("\n")
    if len(lines) < 2:
        raise SidecarError(f"Description file '{source}' has no tag line")
    # Tags keep their surrounding whitespace
    return lines[0], lines[1].split("-")


def read_sidecar(description_dir: Path, file_name: str) -> Tuple[str, List[str]]:
    sidecar_name = file_name.replace(AUDIO_EXTENSION, DESCRIPTION_EXTENSION, 1)
    try:
        text = (Path(description_dir) / sidecar_name).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SidecarError(f"Description file '{sidecar_name}' could not be read: {e}") from e
    return parse_sidecar(text, source=sidecar_name)


def build_sound(sound_id: int, file_name: str, description_dir: Path) -> Sound:
    description, tags = read_sidecar(description_dir, file_name)
    return Sound(
        id=sound_id,
        name=derive_title(file_name),
        description=description,
        tags=tuple(tags),
        audio=f"{AUDIO_ROUTE}/{file_name}",
        cover=f"{COVER_ROUTE}/{file_name.replace(AUDIO_EXTENSION, COVER_EXTENSION, 1)}",
    )


def build_catalog(music_dir: Path, description_dir: Path) -> List[Sound]:
    """
    Scan ``music_dir`` and build the catalog in directory-listing order.

    A directory that cannot be listed yields an empty catalog. A broken
    sidecar raises SidecarError and aborts the whole build.
    """
    try:
        file_names = os.listdir(music_dir)
    except OSError as e:
        log.warning("catalog.scan_failed", music_dir=str(music_dir), error=str(e))
        return []

    sounds: List[Sound] = []
    for file_name in file_names:
        if not file_name.endswith(AUDIO_EXTENSION):
            continue
        sounds.append(build_sound(len(sounds) + 1, file_name, description_dir))

    log.info("catalog.built", music_dir=str(music_dir), count=len(sounds))
    return sounds


def matches(sound: Sound, term: str) -> bool:
    needle = term.lower()
    if needle in sound.name.lower():
        return True
    return any(needle in tag.lower() for tag in sound.tags)


def filter_sounds(sounds: Iterable[Sound], term: Optional[str] = None) -> List[Sound]:
    """Keep sounds whose name or any tag contains ``term``, ignoring case. No term keeps everything."""
    sounds = list(sounds)
    if not term:
        return sounds
    result = [s for s in sounds if matches(s, term)]
    log.info("catalog.filtered", term=term, total=len(sounds), matched=len(result))
    return result
