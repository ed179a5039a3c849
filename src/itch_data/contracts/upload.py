"""
Data contracts for itch.io uploads.

An upload is tied to a game page. It is one of:

- traditional: contents stay the same for a given upload id
- wharf-enabled: any number of builds can be pushed to it
- external: just points to a URL. Contents can change at any time,
  downloads can't be resumed reliably and the remote server may not
  serve the file directly.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field, model_validator

from itch_data.contracts.base import ByteCount, ItchId, PlatformFlags
from itch_data.contracts.build import Build
from itch_data.contracts.enums import UploadType


class UploadKind(str, Enum):
    """How an upload's contents are distributed. Not part of the wire format."""

    TRADITIONAL = "traditional"
    WHARF = "wharf"
    EXTERNAL = "external"


class Upload(PlatformFlags):
    """A distributable artifact attached to a game page."""

    id: ItchId
    created_at: datetime
    updated_at: datetime
    filename: str | None = Field(default=None, description="Unset for external uploads")
    display_name: str | None = Field(default=None, description="Set by the developer")
    type: UploadType
    size: ByteCount | None = Field(
        default=None, description="Size in bytes; latest archive size for wharf uploads"
    )
    demo: bool | None = Field(default=None, description="Demo, downloadable for free")
    preorder: bool | None = Field(default=None, description="Pre-order placeholder")

    # Wharf-enabled uploads only, as of the time of the request
    build_id: ItchId | None = Field(default=None, description="Latest build id")
    build: Build | None = Field(default=None, description="Latest build")
    channel_name: str | None = Field(
        default=None, description="Channel; not a substitute for platform flags"
    )

    @model_validator(mode="after")
    def check_build_reference(self) -> "Upload":
        if self.build is not None and self.build_id is not None and self.build.id != self.build_id:
            raise ValueError(
                f"build.id ({self.build.id}) doesn't match buildId ({self.build_id})"
            )
        return self

    @property
    def kind(self) -> UploadKind:
        if self.build_id is not None or self.build is not None:
            return UploadKind.WHARF
        if self.filename is None:
            return UploadKind.EXTERNAL
        return UploadKind.TRADITIONAL

    @property
    def is_downloadable(self) -> bool:
        return not self.preorder

    @property
    def label(self) -> str | None:
        """Developer-set name, falling back to the filename."""
        return self.display_name or self.filename
