"""
Command-line interface for itch-data.

Validates saved itch.io payloads and inspects build chains.
"""

import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from itch_data.chain import BuildChain
from itch_data.config import get_settings
from itch_data.contracts import Build
from itch_data.errors import ContractValidationError, ItchDataError, UnknownEnumValueError
from itch_data.logger import get_logger, setup_logging
from itch_data.parsing import MODEL_REGISTRY, parse_payload, unknown_enum_values

logger = get_logger(__name__, component="cli")


class CLIOutput(BaseModel):
    """Structured output for CLI commands."""

    success: bool
    command: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    data: dict[str, Any] | list[Any] | None = None
    error: str | None = None


def print_json(output: CLIOutput) -> None:
    """Print output as formatted JSON."""
    print(json.dumps(output.model_dump(), indent=2, default=str))


def _load_json(path: str) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def cmd_test_config() -> None:
    """Show effective configuration."""
    settings = get_settings()

    print_json(
        CLIOutput(
            success=True,
            command="test-config",
            data={
                "environment": settings.environment,
                "log_level": settings.logging.level,
                "log_format": settings.logging.format,
                "reject_unknown_enums": settings.contracts.reject_unknown_enums,
                "log_unknown_enums": settings.contracts.log_unknown_enums,
            },
        )
    )


def cmd_kinds() -> None:
    """List the payload kinds `validate` understands."""
    print_json(
        CLIOutput(
            success=True,
            command="kinds",
            data={kind: model.__name__ for kind, model in MODEL_REGISTRY.items()},
        )
    )


def cmd_validate(kind: str, path: str) -> None:
    """Validate a payload file (one object or a list of objects)."""
    model = MODEL_REGISTRY.get(kind)
    if model is None:
        raise ItchDataError(
            f"Unknown kind '{kind}', expected one of: {', '.join(MODEL_REGISTRY)}"
        )

    raw = _load_json(path)
    payloads = raw if isinstance(raw, list) else [raw]
    logger.info("Validating payloads", kind=kind, path=path, count=len(payloads))

    instances = [parse_payload(model, payload) for payload in payloads]
    unknown = [
        {"index": index, "field": field, "value": value}
        for index, instance in enumerate(instances)
        for field, value in unknown_enum_values(instance)
    ]

    print_json(
        CLIOutput(
            success=True,
            command="validate",
            data={
                "kind": kind,
                "model": model.__name__,
                "count": len(instances),
                "payloads": [instance.to_payload() for instance in instances],
                "unknown_enum_values": unknown,
            },
        )
    )


def cmd_chain(path: str, build_id: int) -> None:
    """Show the ancestry of a build from a file holding a list of builds."""
    raw = _load_json(path)
    if not isinstance(raw, list):
        raise ItchDataError("Expected a JSON list of builds", model="Build")

    chain = BuildChain(parse_payload(Build, payload) for payload in raw)
    ancestry = list(chain.ancestry(build_id))

    print_json(
        CLIOutput(
            success=True,
            command="chain",
            data={
                "build_id": build_id,
                "root_id": ancestry[-1].id,
                "hops_to_root": len(ancestry) - 1,
                "ancestry": [
                    {"id": build.id, "version": build.version, "user_version": build.user_version}
                    for build in ancestry
                ],
            },
        )
    )


def print_usage() -> None:
    """Print CLI usage information."""
    usage = """
itch-data CLI
=============

Usage: itch-data <command> [arguments]

Commands:
  test-config                   Show effective configuration
  kinds                         List payload kinds
  validate <kind> <file.json>   Validate a payload (object or list)
  chain <builds.json> <id>      Show a build's ancestry

Examples:
  itch-data validate upload upload.json
  itch-data chain builds.json 12345
"""
    print(usage)


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print_usage()
        sys.exit(1)

    setup_logging()
    command = sys.argv[1]

    try:
        if command == "test-config":
            cmd_test_config()

        elif command == "kinds":
            cmd_kinds()

        elif command == "validate":
            if len(sys.argv) < 4:
                print("Error: kind and file required")
                sys.exit(1)
            cmd_validate(sys.argv[2], sys.argv[3])

        elif command == "chain":
            if len(sys.argv) < 4:
                print("Error: file and build_id required")
                sys.exit(1)
            cmd_chain(sys.argv[2], int(sys.argv[3]))

        elif command in ("help", "--help", "-h"):
            print_usage()

        else:
            print(f"Unknown command: {command}")
            print_usage()
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(130)
    except ItchDataError as e:
        data: dict[str, Any] = {"model": e.model, **e.context}
        if isinstance(e, UnknownEnumValueError):
            data["unknown_enum_values"] = e.values
        elif isinstance(e, ContractValidationError):
            data["errors"] = e.errors
        print_json(CLIOutput(success=False, command=command, data=data, error=str(e)))
        sys.exit(1)
    except Exception as e:
        logger.exception("CLI error", error=str(e))
        print_json(CLIOutput(success=False, command=command, error=str(e)))
        sys.exit(1)


if __name__ == "__main__":
    main()
