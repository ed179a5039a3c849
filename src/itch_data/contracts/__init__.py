"""
Data contracts for itch.io API responses.

Pydantic models describing the payloads the itch.io web API returns,
with camelCase wire names and forward-compatible enumerations.
"""

from itch_data.contracts.base import ByteCount, Cents, ItchId, ItchModel, PlatformFlags
from itch_data.contracts.build import Build, BuildFile
from itch_data.contracts.enums import (
    BuildFileSubType,
    BuildFileType,
    GameClassification,
    GameType,
    OpenEnum,
    UploadType,
)
from itch_data.contracts.game import Game, GameEmbedInfo, GameSaleInfo, GameStats, OwnGame
from itch_data.contracts.upload import Upload, UploadKind
from itch_data.contracts.user import AccountFlags, OwnUser, User

__all__ = [
    "AccountFlags",
    "Build",
    "BuildFile",
    "BuildFileSubType",
    "BuildFileType",
    "ByteCount",
    "Cents",
    "Game",
    "GameClassification",
    "GameEmbedInfo",
    "GameSaleInfo",
    "GameStats",
    "GameType",
    "ItchId",
    "ItchModel",
    "OpenEnum",
    "OwnGame",
    "OwnUser",
    "PlatformFlags",
    "Upload",
    "UploadKind",
    "UploadType",
    "User",
]
