"""Pytest configuration and shared fixtures."""

from typing import Any

import pytest

from flickr_lite.session import Session


@pytest.fixture
def api_key() -> str:
    """Return a fake API key for testing."""
    return "test_api_key_123"


@pytest.fixture
def session(api_key: str) -> Session:
    """Return a session without a shared client."""
    return Session(api_key)


@pytest.fixture
def user_response() -> dict[str, Any]:
    """Response of flickr.people.findByUsername / findByEmail."""
    return {
        "user": {"id": "123", "nsid": "123", "username": {"_content": "alice"}},
        "stat": "ok",
    }


@pytest.fixture
def info_response() -> dict[str, Any]:
    """Response of flickr.people.getInfo."""
    return {
        "person": {
            "id": "123",
            "nsid": "123",
            "username": {"_content": "alice"},
            "realname": {"_content": "Alice Liddell"},
            "location": {"_content": "Oxford, UK"},
            "photosurl": {"_content": "https://www.flickr.com/photos/alice/"},
            "profileurl": {"_content": "https://www.flickr.com/people/alice/"},
        },
        "stat": "ok",
    }


def make_photo_entry(photo_id: str, title: str, **overrides: Any) -> dict[str, Any]:
    """Build one photos.photo entry as Flickr returns it."""
    entry = {
        "id": photo_id,
        "owner": "123",
        "secret": "abcdef",
        "server": "65535",
        "farm": 66,
        "title": title,
        "ispublic": 1,
        "isfriend": 0,
        "isfamily": 0,
    }
    entry.update(overrides)
    return entry


@pytest.fixture
def photos_response() -> dict[str, Any]:
    """Response of flickr.people.getPublicPhotos with three photos."""
    return {
        "photos": {
            "page": 1,
            "pages": 1,
            "perpage": 100,
            "total": 3,
            "photo": [
                make_photo_entry("301", "Sunset"),
                make_photo_entry("205", "Harbour"),
                make_photo_entry("999", "Garden"),
            ],
        },
        "stat": "ok",
    }


@pytest.fixture
def fail_response() -> dict[str, Any]:
    """Error payload for an unknown user."""
    return {"stat": "fail", "code": 1, "message": "User not found"}


@pytest.fixture
def photo_entry() -> Any:
    """Return the photo entry factory."""
    return make_photo_entry
