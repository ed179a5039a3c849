"""
String enumerations used by itch.io payloads.

The server adds values over time, so every enumeration here is
"open": an unrecognised string is kept as an unknown member
carrying the raw value rather than failing validation.
"""

from enum import Enum

UNKNOWN_MEMBER_NAME = "UNKNOWN"


class OpenEnum(str, Enum):
    """String enum that tolerates values it doesn't declare."""

    @classmethod
    def _missing_(cls, value: object) -> "OpenEnum | None":
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = UNKNOWN_MEMBER_NAME
        member._value_ = value
        return member

    @property
    def is_known(self) -> bool:
        """False for values added server-side after this release."""
        return type(self)._value2member_map_.get(self._value_) is self

    @classmethod
    def known_values(cls) -> list[str]:
        """Wire values declared on this enumeration."""
        return [member.value for member in cls]


class GameType(OpenEnum):
    """How a game page is presented on the web (downloadable or embed)."""

    DEFAULT = "default"
    FLASH = "flash"  # .swf (legacy)
    UNITY = "unity"  # .unity3d (legacy)
    JAVA = "java"  # .jar (legacy)
    HTML = "html"

    @property
    def is_embed(self) -> bool:
        return self in (GameType.FLASH, GameType.UNITY, GameType.JAVA, GameType.HTML)


class GameClassification(OpenEnum):
    """Creator-picked classification for a page."""

    GAME = "game"
    TOOL = "tool"
    ASSETS = "assets"
    GAME_MOD = "game_mod"
    PHYSICAL_GAME = "physical_game"
    SOUNDTRACK = "soundtrack"
    OTHER = "other"
    COMIC = "comic"
    BOOK = "book"


class UploadType(OpenEnum):
    """What an upload contains: executable, embed, or bonus content."""

    DEFAULT = "default"  # shown as 'executable' in the creator UI
    FLASH = "flash"
    UNITY = "unity"
    JAVA = "java"
    HTML = "html"
    SOUNDTRACK = "soundtrack"
    OTHER = "other"

    @property
    def is_embed(self) -> bool:
        return self in (UploadType.FLASH, UploadType.UNITY, UploadType.JAVA, UploadType.HTML)


class BuildFileType(OpenEnum):
    """Kind of artifact attached to a build."""

    SIGNATURE = "signature"  # hashes to verify integrity
    PATCH = "patch"  # upgrade from the parent build
    ARCHIVE = "archive"  # full contents, independent of other builds
    MANIFEST = "manifest"  # reserved
    UNPACKED = "unpacked"  # single-file push, uncompressed


class BuildFileSubType(OpenEnum):
    """Encoding of a build file."""

    DEFAULT = "default"  # brotli q1
    GZIP = "gzip"  # reserved
    OPTIMIZED = "optimized"  # rediff'd patches, zstd-q9
    ACCELERATED = "accelerated"  # reserved
