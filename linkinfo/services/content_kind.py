"""Resolves a ContentKind from an og:type string or a response MIME type"""

import logging
import mimetypes
from typing import FrozenSet, Optional

from linkinfo.core.enums import ContentKind


logger = logging.getLogger(__name__)


# Free-form og:type values seen in the wild that are not canonical kinds
OG_TYPE_ALIASES = {
    "music.other": ContentKind.MUSIC,
    "music.track": ContentKind.MUSIC_SONG,
    "song": ContentKind.MUSIC_SONG,
    "track": ContentKind.MUSIC_SONG,
    "playlist": ContentKind.MUSIC_PLAYLIST,
    "album": ContentKind.MUSIC_ALBUM,
    "record": ContentKind.MUSIC_ALBUM,
    "radio_station": ContentKind.MUSIC_RADIO_STATION,
    "radio": ContentKind.MUSIC_RADIO_STATION,
    "video.other": ContentKind.VIDEO,
    "movie": ContentKind.VIDEO_MOVIE,
    "film": ContentKind.VIDEO_MOVIE,
    "episode": ContentKind.VIDEO_EPISODE,
    "tv_show": ContentKind.VIDEO_TV_SHOW,
    "tv_series": ContentKind.VIDEO_TV_SHOW,
}

IMAGE_MIME_TYPES = frozenset([
    "image/bmp",
    "image/x-windows-bmp",
    "image/gif",
    "image/jpeg",
    "image/pjpeg",
    "image/x-icon",
    "image/png",
    "image/tiff",
    "image/x-tiff",
])

DOCUMENT_MIME_TYPES = frozenset([
    "application/vnd.ms-powerpoint",
    "application/mspowerpoint",
    "application/x-mspowerpoint",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.template",
    "application/vnd.ms-excel.addin.macroenabled.12",
    "application/vnd.ms-excel",
    "application/vnd.ms-excel.sheet.binary.macroenabled.12",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.template",
    "text/plain",
    "application/rtf",
    "application/x-rtf",
    "text/richtext",
    "application/pdf",
])

HTML_MIME_TYPES = frozenset([
    "text/html",
    "text/x-server-parsed-html",
])

ARCHIVE_MIME_TYPES = frozenset([
    "application/x-compress",
    "application/x-compressed",
    "application/x-zip-compressed",
    "application/zip",
    "multipart/x-zip",
])

# Playable types the mimetypes registry files under application/ or misses entirely
_EXTRA_AUDIOVISUAL_MIME_TYPES = (
    "application/vnd.apple.mpegurl",
    "application/x-mpegurl",
    "audio/mp3",
    "audio/mp4",
    "audio/x-m4a",
    "audio/mpegurl",
    "video/x-m4v",
)


def _load_audiovisual_mime_types() -> FrozenSet[str]:
    # A fresh MimeTypes instance only carries the built-in table, so the result
    # does not depend on the mime.types files of the host.
    registry = mimetypes.MimeTypes()
    known = set()
    for strict in (True, False):
        known.update(registry.types_map[strict].values())
    audiovisual = {
        mime for mime in known
        if mime.startswith("audio/") or mime.startswith("video/")
    }
    audiovisual.update(_EXTRA_AUDIOVISUAL_MIME_TYPES)
    return frozenset(mime for mime in audiovisual if not mime.startswith("text/"))


AUDIOVISUAL_MIME_TYPES = _load_audiovisual_mime_types()


def kind_for_og_type(og_type: Optional[str]) -> Optional[ContentKind]:
    """
    Map an og:type value onto a ContentKind.

    Canonical values map onto themselves, known aliases are translated and
    anything else returns None so the caller can fall back to its default.
    """
    if not og_type:
        return None
    try:
        return ContentKind(og_type)
    except ValueError:
        return OG_TYPE_ALIASES.get(og_type)


def kind_for_mime_type(mime_type: str) -> ContentKind:
    """Classify a response by its primary MIME type (no parameters)"""
    mime_type = mime_type.strip().lower()
    if mime_type in AUDIOVISUAL_MIME_TYPES:
        if mime_type.startswith("audio/"):
            return ContentKind.FILE_AUDIO
        return ContentKind.FILE_VIDEO
    if mime_type in IMAGE_MIME_TYPES:
        return ContentKind.FILE_IMAGE
    if mime_type in DOCUMENT_MIME_TYPES:
        return ContentKind.FILE_DOCUMENT
    if mime_type in HTML_MIME_TYPES:
        return ContentKind.WEBSITE
    if mime_type in ARCHIVE_MIME_TYPES:
        return ContentKind.FILE_ARCHIVE
    logger.debug(f"No content kind registered for MIME type: {mime_type}")
    return ContentKind.FILE_OTHER
