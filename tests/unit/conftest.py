"""Shared payload fixtures."""

from typing import Any

import pytest


@pytest.fixture
def user_payload() -> dict[str, Any]:
    return {
        "id": 4242,
        "username": "fasterthanlime",
        "displayName": "Amos",
        "url": "https://fasterthanlime.itch.io",
        "coverUrl": "https://img.itch.zone/avatar.gif",
        "stillCoverUrl": "https://img.itch.zone/avatar.png",
    }


@pytest.fixture
def game_payload() -> dict[str, Any]:
    return {
        "id": 1001,
        "createdAt": "2016-11-07T10:00:00Z",
        "publishedAt": "2016-11-08T12:30:00Z",
        "url": "https://studio.itch.io/space-game",
        "userId": 4242,
        "title": "Space Game",
        "shortText": "Shoot the things",
        "stillCoverUrl": "https://img.itch.zone/cover.png",
        "coverUrl": "https://img.itch.zone/cover.gif",
        "type": "html",
        "classification": "game",
        "embed": {"width": 960, "height": 540, "fullscreen": True},
        "hasDemo": False,
        "minPrice": 499,
        "sale": {"id": 77, "rate": 40},
        "currency": "USD",
        "inPressSystem": True,
        "canBeBought": True,
        "pLinux": True,
        "pWindows": False,
        "pOsx": True,
        "pAndroid": False,
    }


@pytest.fixture
def build_file_payload() -> dict[str, Any]:
    return {
        "type": "archive",
        "subType": "default",
        "createdAt": "2017-01-02T03:04:05Z",
        "updatedAt": "2017-01-02T03:05:00Z",
    }


@pytest.fixture
def build_payload(user_payload: dict[str, Any], build_file_payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": 9002,
        "parentBuildId": 9001,
        "createdAt": "2017-01-02T03:04:05Z",
        "updatedAt": "2017-01-02T03:06:00Z",
        "user": user_payload,
        "version": 2,
        "userVersion": "1.0.1",
        "files": [
            build_file_payload,
            {
                "type": "patch",
                "subType": "optimized",
                "createdAt": "2017-01-02T03:04:05Z",
                "updatedAt": "2017-01-02T03:10:00Z",
            },
        ],
    }


@pytest.fixture
def upload_payload(build_payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": 5005,
        "createdAt": "2017-01-01T00:00:00Z",
        "updatedAt": "2017-01-02T03:06:00Z",
        "filename": "space-game-linux.zip",
        "displayName": "Linux build",
        "type": "default",
        "size": 104857600,
        "demo": False,
        "preorder": False,
        "pLinux": True,
        "pWindows": False,
        "buildId": 9002,
        "build": build_payload,
        "channelName": "linux-64",
    }
