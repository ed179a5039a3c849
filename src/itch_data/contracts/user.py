"""
Data contracts for itch.io users.
"""

import json
from typing import Any

from pydantic import Field, model_validator

from itch_data.contracts.base import ItchId, ItchModel


class User(ItchModel):
    """A user on the itch.io website."""

    id: ItchId = Field(..., description="Site-wide unique identifier")
    username: str
    display_name: str | None = Field(default=None)
    url: str = Field(..., description="Canonical address of the user's page")
    cover_url: str | None = Field(default=None, description="Avatar, may be a GIF")
    still_cover_url: str | None = Field(
        default=None, description="Static avatar, only set if cover_url is a GIF"
    )

    @property
    def name(self) -> str:
        """Display name, falling back to the username."""
        return self.display_name or self.username

    @property
    def static_cover_url(self) -> str | None:
        """An avatar URL that is safe to show where animation isn't wanted."""
        return self.still_cover_url or self.cover_url


class AccountFlags(ItchModel):
    """Flags only visible to the account owner."""

    # The server checks press status itself, faking it locally gets nothing
    press_user: bool = Field(default=False, description="User owns a press account")
    developer: bool = Field(default=False, description="Interested in publishing on itch.io")


class OwnUser(ItchModel):
    """
    The authenticated user, as returned by the /me endpoint.

    Splits the flat payload into the public `user` and the
    self-only `account` flags.
    """

    user: User
    account: AccountFlags

    @model_validator(mode="before")
    @classmethod
    def split_flat_payload(cls, data: Any) -> Any:
        if isinstance(data, dict) and "user" not in data:
            return {"user": data, "account": data}
        return data

    def to_payload(self) -> dict[str, Any]:
        """Serialize back to the flat wire payload."""
        return {**self.user.to_payload(), **self.account.to_payload()}

    def to_json(self) -> str:
        return json.dumps(self.to_payload())
