"""
Exception hierarchy for payload validation and build-chain navigation.
"""

from datetime import datetime, timezone
from typing import Any


class ItchDataError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        model: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.model = model
        self.context = context or {}
        self.timestamp = datetime.now(timezone.utc)


class ContractValidationError(ItchDataError):
    """Raised when a payload doesn't match its contract."""

    def __init__(
        self,
        message: str,
        *,
        model: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, model=model, context=context)
        self.errors = errors or []


class UnknownEnumValueError(ContractValidationError):
    """Raised for unknown enumeration values when they are configured as fatal."""

    def __init__(
        self,
        message: str,
        *,
        model: str | None = None,
        values: list[tuple[str, str]] | None = None,
    ) -> None:
        super().__init__(message, model=model)
        self.values = values or []


class BuildChainError(ItchDataError):
    """Base exception for build-chain navigation."""

    def __init__(self, message: str, *, build_id: int | None = None) -> None:
        super().__init__(message, model="Build", context={"build_id": build_id})
        self.build_id = build_id


class UnknownBuildError(BuildChainError):
    """Raised when a build id is not in the chain index."""

    pass


class DuplicateBuildError(BuildChainError):
    """Raised when two snapshots share a build id."""

    pass


class BrokenChainError(BuildChainError):
    """Raised when a parent build is missing from the index."""

    pass


class ChainCycleError(BuildChainError):
    """Raised when following parent links loops back on itself."""

    pass


class NonSequentialPatchError(BuildChainError):
    """Raised when patches can't be applied in sequence between two builds."""

    pass
