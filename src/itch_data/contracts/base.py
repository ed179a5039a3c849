"""
Shared base model and field types for itch.io contracts.

The API speaks camelCase JSON; models expose snake_case attributes
and accept either spelling on input.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ItchId = Annotated[int, Field(gt=0, description="itch.io-generated unique identifier")]

# Money and sizes are whole numbers on the wire, never floats
Cents = Annotated[int, Field(ge=0, strict=True, description="Amount in cents of a dollar")]
ByteCount = Annotated[int, Field(ge=0, strict=True, description="Size in bytes")]

Pixels = Annotated[int, Field(ge=0, description="Length in pixels")]


class ItchModel(BaseModel):
    """
    Base class for every itch.io payload.

    Instances are immutable snapshots of server-owned state. Fields
    that were absent from the payload stay unset, so `to_payload()`
    reproduces absence instead of filling in defaults.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to a camelCase, JSON-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def to_json(self) -> str:
        """Serialize to camelCase JSON text."""
        return self.model_dump_json(by_alias=True, exclude_unset=True)


class PlatformFlags(ItchModel):
    """
    Creator-asserted platform compatibility.

    Each flag is tri-state: True, False, or None when the creator
    hasn't tagged the platform either way.
    """

    p_linux: bool | None = Field(default=None, description="Tagged 'linux compatible'")
    p_windows: bool | None = Field(default=None, description="Tagged 'windows compatible'")
    p_osx: bool | None = Field(default=None, description="Tagged 'macOS compatible'")
    p_android: bool | None = Field(default=None, description="Tagged 'android compatible'")

    @property
    def platforms(self) -> dict[str, bool]:
        """Asserted flags only, keyed by platform name."""
        flags = {
            "linux": self.p_linux,
            "windows": self.p_windows,
            "osx": self.p_osx,
            "android": self.p_android,
        }
        return {name: value for name, value in flags.items() if value is not None}
