"""
itch.io data contracts.

Pydantic models describing the payloads returned by the itch.io
web API (games, users, uploads and builds), plus helpers to
validate them and navigate build chains.
"""

from itch_data.chain import BuildChain
from itch_data.config import Settings, get_settings
from itch_data.errors import (
    BuildChainError,
    ContractValidationError,
    ItchDataError,
    UnknownEnumValueError,
)
from itch_data.logger import get_logger, setup_logging
from itch_data.parsing import parse_json, parse_payload

__version__ = "0.1.0"

__all__ = [
    "BuildChain",
    "BuildChainError",
    "ContractValidationError",
    "ItchDataError",
    "Settings",
    "UnknownEnumValueError",
    "get_logger",
    "get_settings",
    "parse_json",
    "parse_payload",
    "setup_logging",
    "__version__",
]
