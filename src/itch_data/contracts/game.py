"""
Data contracts for itch.io game pages.

A "game" is any page on itch.io: games, tools, comics, soundtracks...
"""

import json
from datetime import datetime
from decimal import Decimal
from typing import Any, Literal

from pydantic import Field, model_validator

from itch_data.contracts.base import Cents, ItchId, ItchModel, Pixels, PlatformFlags
from itch_data.contracts.enums import GameClassification, GameType


class GameEmbedInfo(ItchModel):
    """Presentation information for embed games."""

    width: Pixels = Field(..., description="Width of the initial viewport")
    height: Pixels = Field(..., description="Height of the initial viewport")
    fullscreen: bool = Field(..., description="Whether itch.io shows a fullscreen button")


class GameSaleInfo(ItchModel):
    """Discount info, useful to compute actual price."""

    id: ItchId = Field(..., description="Numeric identifier for the sale")
    rate: int = Field(..., ge=0, le=100, strict=True, description="Discount percentage")


class Game(PlatformFlags):
    """
    An itch.io page, which may be a game or something that isn't a game.

    Platform flags are creator-controlled tags, not verified
    compatibility.
    """

    # Identifiers
    id: ItchId
    url: str = Field(..., description="Address of the game's page on itch.io")
    user_id: ItchId = Field(..., description="Developer this game belongs to")

    # Dates (absent, null or empty while unpublished)
    created_at: datetime | Literal[""] | None = Field(default=None)
    published_at: datetime | Literal[""] | None = Field(default=None)

    # Description
    title: str = Field(..., description="Human-friendly title, may contain any character")
    short_text: str | None = Field(default=None, description="Human-friendly short description")
    still_cover_url: str | None = Field(default=None, description="Non-GIF cover url")
    cover_url: str | None = Field(default=None, description="Cover url, might be a GIF")

    # Classification
    type: GameType = Field(..., description="Downloadable, html, etc.")
    classification: GameClassification = Field(..., description="Game, tool, comic, etc.")
    embed: GameEmbedInfo | None = Field(default=None, description="Only set for HTML5 games")

    # Pricing
    has_demo: bool = Field(default=False, description="Has a demo downloadable for free")
    min_price: Cents = Field(default=0, description="Minimum price in cents")
    sale: GameSaleInfo | None = Field(default=None, description="Current sale, if any")
    # Never populated by the server so far
    currency: str | None = Field(default=None)
    in_press_system: bool = Field(default=False, description="Free for press users")
    can_be_bought: bool = Field(default=False, description="Accepts donations or purchases")

    @model_validator(mode="after")
    def check_embed_type(self) -> "Game":
        """Embeds only come with HTML games (unknown types are let through)."""
        if self.embed is not None and self.type.is_known and self.type != GameType.HTML:
            raise ValueError(f"embed info is only valid for html games, got type={self.type.value}")
        return self

    @property
    def is_published(self) -> bool:
        return isinstance(self.published_at, datetime)

    @property
    def is_free(self) -> bool:
        return self.min_price == 0

    @property
    def min_price_dollars(self) -> Decimal:
        """Convert minimum price from cents to dollars."""
        return Decimal(self.min_price) / 100

    @property
    def current_price(self) -> int:
        """Minimum price in cents after the active sale, rounded down."""
        if self.sale is None:
            return self.min_price
        return self.min_price * (100 - self.sale.rate) // 100


class GameStats(ItchModel):
    """All-time counters only the page's creators can see."""

    downloads_count: int = Field(default=0, ge=0)
    purchases_count: int = Field(default=0, ge=0)
    views_count: int = Field(default=0, ge=0)

    def is_progression_of(self, earlier: "GameStats") -> bool:
        """Check that no counter went down since an earlier snapshot."""
        return (
            self.downloads_count >= earlier.downloads_count
            and self.purchases_count >= earlier.purchases_count
            and self.views_count >= earlier.views_count
        )


class OwnGame(ItchModel):
    """
    A game page as seen by its creator.

    The wire payload is flat (page fields and counters side by side);
    it is split into the public `game` and the creator-only `stats`.
    """

    game: Game
    stats: GameStats

    @model_validator(mode="before")
    @classmethod
    def split_flat_payload(cls, data: Any) -> Any:
        if isinstance(data, dict) and "game" not in data:
            return {"game": data, "stats": data}
        return data

    def to_payload(self) -> dict[str, Any]:
        """Serialize back to the flat wire payload."""
        return {**self.game.to_payload(), **self.stats.to_payload()}

    def to_json(self) -> str:
        return json.dumps(self.to_payload())
