"""
Data contracts for wharf builds.

A wharf-enabled upload is a chain of builds. Each build is the child
of the previous one and patches only apply sequentially, so a build
is effectively one version of its upload.
"""

from datetime import datetime

from pydantic import Field, model_validator

from itch_data.contracts.base import ItchId, ItchModel
from itch_data.contracts.enums import BuildFileSubType, BuildFileType
from itch_data.contracts.user import User


class BuildFile(ItchModel):
    """One physical artifact belonging to a build."""

    type: BuildFileType
    sub_type: BuildFileSubType = Field(..., description="Refines type (encoding)")
    created_at: datetime
    updated_at: datetime

    @property
    def requires_parent(self) -> bool:
        """Patches are applied against the parent build's contents."""
        return self.type == BuildFileType.PATCH


class Build(ItchModel):
    """One version in a wharf-enabled upload's patch chain."""

    id: ItchId
    parent_build_id: ItchId | None = Field(
        default=None, description="Previous build in the chain, unset for the root"
    )
    created_at: datetime
    updated_at: datetime
    user: User | None = Field(default=None, description="User who pushed this build")
    version: int = Field(..., ge=0, description="itch.io-generated version number")
    user_version: str | None = Field(default=None, description="Creator-provided version")
    files: list[BuildFile] | None = Field(default=None)

    @model_validator(mode="after")
    def check_parent(self) -> "Build":
        if self.parent_build_id == self.id:
            raise ValueError(f"build {self.id} can't be its own parent")
        return self

    @property
    def is_root(self) -> bool:
        return self.parent_build_id is None

    def find_file(
        self,
        file_type: BuildFileType,
        sub_type: BuildFileSubType | None = None,
    ) -> BuildFile | None:
        """Return the first file of the given type (and subtype, if given)."""
        for build_file in self.files or []:
            if build_file.type != file_type:
                continue
            if sub_type is not None and build_file.sub_type != sub_type:
                continue
            return build_file
        return None
