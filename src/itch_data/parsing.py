"""
Validation entry points for raw itch.io payloads.

Wraps pydantic validation so callers deal with this package's
exceptions, and reports enumeration values added server-side
since this release.
"""

from collections.abc import Iterator
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from itch_data.config import ContractsConfig, get_settings
from itch_data.contracts import (
    Build,
    BuildFile,
    Game,
    OpenEnum,
    OwnGame,
    OwnUser,
    Upload,
    User,
)
from itch_data.errors import ContractValidationError, UnknownEnumValueError
from itch_data.logger import get_logger

M = TypeVar("M", bound=BaseModel)

logger = get_logger(__name__, component="parsing")

MODEL_REGISTRY: dict[str, type[BaseModel]] = {
    "game": Game,
    "own-game": OwnGame,
    "user": User,
    "own-user": OwnUser,
    "upload": Upload,
    "build": Build,
    "build-file": BuildFile,
}


def _walk(value: Any, path: str) -> Iterator[tuple[str, str]]:
    if isinstance(value, OpenEnum):
        if not value.is_known:
            yield path, value.value
    elif isinstance(value, BaseModel):
        yield from unknown_enum_values(value, prefix=f"{path}.")
    elif isinstance(value, list):
        for index, item in enumerate(value):
            yield from _walk(item, f"{path}[{index}]")


def unknown_enum_values(instance: BaseModel, prefix: str = "") -> list[tuple[str, str]]:
    """
    Find enumeration values this release doesn't declare.

    Returns:
        (dotted attribute path, raw wire value) pairs, e.g.
        [("build.files[0].type", "future_type")]
    """
    found: list[tuple[str, str]] = []
    for name in type(instance).model_fields:
        found.extend(_walk(getattr(instance, name), f"{prefix}{name}"))
    return found


def _check_enums(instance: M, config: ContractsConfig) -> M:
    unknown = unknown_enum_values(instance)
    if not unknown:
        return instance

    model_name = type(instance).__name__
    if config.reject_unknown_enums:
        raise UnknownEnumValueError(
            f"{model_name} payload has {len(unknown)} unknown enum value(s)",
            model=model_name,
            values=unknown,
        )
    if config.log_unknown_enums:
        for path, value in unknown:
            logger.warning("Unknown enum value", model=model_name, field=path, value=value)
    return instance


def _wrap_error(model: type[BaseModel], error: PydanticValidationError) -> ContractValidationError:
    logger.warning(
        "Payload failed validation",
        model=model.__name__,
        error_count=error.error_count(),
    )
    return ContractValidationError(
        f"Invalid {model.__name__} payload: {error.error_count()} error(s)",
        model=model.__name__,
        errors=error.errors(include_url=False),
    )


def parse_payload(
    model: type[M],
    payload: Any,
    *,
    config: ContractsConfig | None = None,
) -> M:
    """
    Validate a decoded JSON payload against a contract.

    Args:
        model: Contract class, e.g. Game
        payload: Decoded JSON (usually a dict)
        config: Validation behaviour (uses application settings if None)

    Raises:
        ContractValidationError: if the payload doesn't match
        UnknownEnumValueError: on unknown enum values, when configured
    """
    config = config or get_settings().contracts
    try:
        instance = model.model_validate(payload)
    except PydanticValidationError as e:
        raise _wrap_error(model, e) from e
    return _check_enums(instance, config)


def parse_json(
    model: type[M],
    raw: str | bytes,
    *,
    config: ContractsConfig | None = None,
) -> M:
    """Same as parse_payload, from JSON text."""
    config = config or get_settings().contracts
    try:
        instance = model.model_validate_json(raw)
    except PydanticValidationError as e:
        raise _wrap_error(model, e) from e
    return _check_enums(instance, config)
