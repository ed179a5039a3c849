"""Tests for the command-line interface."""

import json
import sys
from pathlib import Path
from typing import Any

import pytest

from itch_data import cli
from itch_data.config import Settings


def run_cli(monkeypatch: pytest.MonkeyPatch, *args: str) -> None:
    monkeypatch.setattr(cli, "setup_logging", lambda: None)
    monkeypatch.setattr(sys, "argv", ["itch-data", *args])
    cli.main()


def read_document(out: str) -> dict[str, Any]:
    """Parse the JSON document printed after any log lines."""
    return json.loads(out[out.index("{\n") :])


def write_json(path: Path, data: Any) -> str:
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def build_payload(build_id: int, parent_build_id: int | None, version: int) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": build_id,
        "createdAt": "2017-01-02T03:04:05Z",
        "updatedAt": "2017-01-02T03:04:05Z",
        "version": version,
    }
    if parent_build_id is not None:
        payload["parentBuildId"] = parent_build_id
    return payload


class TestValidateCommand:
    """Tests for `validate`."""

    def test_single_payload(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        tmp_path: Path,
        upload_payload: dict[str, Any],
    ) -> None:
        path = write_json(tmp_path / "upload.json", upload_payload)

        run_cli(monkeypatch, "validate", "upload", path)

        document = read_document(capsys.readouterr().out)
        assert document["success"] is True
        assert document["data"]["model"] == "Upload"
        assert document["data"]["count"] == 1
        assert document["data"]["payloads"][0]["channelName"] == "linux-64"
        assert document["data"]["unknown_enum_values"] == []

    def test_list_of_payloads(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        tmp_path: Path,
        user_payload: dict[str, Any],
    ) -> None:
        second = {**user_payload, "id": 4243, "username": "other"}
        path = write_json(tmp_path / "users.json", [user_payload, second])

        run_cli(monkeypatch, "validate", "user", path)

        document = read_document(capsys.readouterr().out)
        assert document["data"]["count"] == 2

    def test_invalid_payload(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        tmp_path: Path,
        game_payload: dict[str, Any],
    ) -> None:
        game_payload["minPrice"] = 4.99
        path = write_json(tmp_path / "game.json", game_payload)

        with pytest.raises(SystemExit) as exc_info:
            run_cli(monkeypatch, "validate", "game", path)

        assert exc_info.value.code == 1
        document = read_document(capsys.readouterr().out)
        assert document["success"] is False
        assert document["data"]["model"] == "Game"
        assert len(document["data"]["errors"]) == 1

    def test_unknown_kind(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        tmp_path: Path,
    ) -> None:
        path = write_json(tmp_path / "thing.json", {})

        with pytest.raises(SystemExit):
            run_cli(monkeypatch, "validate", "collection", path)

        document = read_document(capsys.readouterr().out)
        assert "Unknown kind 'collection'" in document["error"]


class TestChainCommand:
    """Tests for `chain`."""

    def test_ancestry(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        tmp_path: Path,
    ) -> None:
        builds = [
            build_payload(1, None, 1),
            build_payload(2, 1, 2),
            build_payload(3, 2, 3),
        ]
        path = write_json(tmp_path / "builds.json", builds)

        run_cli(monkeypatch, "chain", path, "3")

        document = read_document(capsys.readouterr().out)
        assert document["data"]["root_id"] == 1
        assert document["data"]["hops_to_root"] == 2
        assert [build["id"] for build in document["data"]["ancestry"]] == [3, 2, 1]

    def test_broken_chain(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        tmp_path: Path,
    ) -> None:
        path = write_json(tmp_path / "builds.json", [build_payload(3, 2, 3)])

        with pytest.raises(SystemExit):
            run_cli(monkeypatch, "chain", path, "3")

        document = read_document(capsys.readouterr().out)
        assert document["success"] is False
        assert document["data"]["build_id"] == 3


class TestMisc:
    """Tests for the remaining commands."""

    def test_kinds(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        run_cli(monkeypatch, "kinds")

        document = read_document(capsys.readouterr().out)
        assert document["data"]["own-game"] == "OwnGame"

    def test_no_command(self, monkeypatch: pytest.MonkeyPatch) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run_cli(monkeypatch)

        assert exc_info.value.code == 1

    def test_test_config(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(cli, "get_settings", lambda: Settings())
        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("ITCH_CONTRACTS_REJECT_UNKNOWN_ENUMS", "true")
        monkeypatch.setenv("LOG_FORMAT", "console")

        run_cli(monkeypatch, "test-config")

        document = read_document(capsys.readouterr().out)
        assert document["success"] is True
        assert document["command"] == "test-config"
        assert document["data"]["environment"] == "staging"
        assert document["data"]["log_format"] == "console"
        assert document["data"]["reject_unknown_enums"] is True
        assert document["data"]["log_unknown_enums"] is True
