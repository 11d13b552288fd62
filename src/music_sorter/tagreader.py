"""Tag reading via mutagen.

A file counts as audio exactly when mutagen can open it. The same open
also yields the artist/album/title strings, so each file is read once.
"""

from pathlib import Path

import mutagen
from loguru import logger

from .models import TagProbe, Tags

log = logger.bind(stage="tags")

# Easy key, ID3 frame, ASF attribute, MP4 atom
_ARTIST_KEYS = ("artist", "TPE1", "Author", "\xa9ART")
_ALBUM_KEYS = ("album", "TALB", "WM/AlbumTitle", "\xa9alb")
_TITLE_KEYS = ("title", "TIT2", "Title", "\xa9nam")


def _first(value: object) -> str:
    """Flatten a mutagen tag value (list, ID3 frame, ASF attribute) to one string."""
    if value is None:
        return ""
    # ID3 text frames keep their values in .text
    if hasattr(value, "text"):
        value = list(value.text)
    if isinstance(value, list):
        if not value:
            return ""
        return str(value[0]).strip()
    return str(value).strip()


def _tag_value(tags, *keys: str) -> str:
    """Return the first non-empty value among keys.

    Easy keys cover MP3, MP4 and Vorbis-style containers; WAV/AIFF expose
    raw ID3 frames and WMA uses ASF attribute names.
    """
    for key in keys:
        try:
            value = _first(tags.get(key))
        except (KeyError, ValueError) as e:
            log.debug(f"Unreadable tag {key!r}: {e}")
            continue
        if value:
            return value
    return ""


def probe_tags(file: Path) -> TagProbe:
    """Open file with mutagen and report whether it is audio and its tags.

    Returns TagProbe(is_audio=False) when mutagen does not recognise the
    format or fails to parse it, TagProbe(is_audio=True, tags=None) when
    the file parses but has no tag container.
    """
    try:
        audio = mutagen.File(file, easy=True)
    except (mutagen.MutagenError, OSError, ValueError) as e:
        log.debug(f"Not readable as audio: {file} ({e})")
        return TagProbe(is_audio=False)

    if audio is None:
        log.debug(f"Unrecognised format: {file}")
        return TagProbe(is_audio=False)

    if audio.tags is None:
        log.debug(f"No tags in {file}")
        return TagProbe(is_audio=True, tags=None)

    tags = Tags(
        artist=_tag_value(audio.tags, *_ARTIST_KEYS),
        album=_tag_value(audio.tags, *_ALBUM_KEYS),
        title=_tag_value(audio.tags, *_TITLE_KEYS),
    )
    return TagProbe(is_audio=True, tags=tags)


def is_audio_file(file: Path) -> bool:
    """True if the tag reader can open file."""
    return probe_tags(file).is_audio
