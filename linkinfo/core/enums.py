from enum import Enum


class ContentKind(str, Enum):
    """Classification of the content behind a URL"""

    ARTICLE = "article"
    BOOK = "book"
    PROFILE = "profile"
    WEBSITE = "website"

    FILE_IMAGE = "file.image"
    FILE_VIDEO = "file.video"
    FILE_AUDIO = "file.audio"
    FILE_DOCUMENT = "file.document"
    FILE_ARCHIVE = "file.archive"
    FILE_OTHER = "file.other"

    MUSIC = "music"
    MUSIC_SONG = "music.song"
    MUSIC_PLAYLIST = "music.playlist"
    MUSIC_ALBUM = "music.album"
    MUSIC_RADIO_STATION = "music.radio_station"

    VIDEO_MOVIE = "video.movie"
    VIDEO_EPISODE = "video.episode"
    VIDEO_TV_SHOW = "video.tv_show"
    VIDEO = "video"

    @property
    def is_file(self) -> bool:
        return self.value.startswith("file")


class ExtractionMode(str, Enum):
    # Fetch over HTTP, validate the response, decode with fallbacks, then parse
    BASIC = "basic"
    # Hand the body straight to the parser and let it sniff the encoding
    DIRECT = "direct"


class NonSuccessPolicy(str, Enum):
    """What to do when the server answers outside the 2xx range"""

    DEGRADE = "degrade"
    FAIL = "fail"
