"""Flickr Lite - A small client for Flickr people and their public photos."""

__version__ = "0.1.0"

from flickr_lite.models import ApiError, ApiResult, ErrorKind, PersonInfo, SafeSearch
from flickr_lite.person import Person, get_person_by_email, get_person_by_username
from flickr_lite.photo import Photo
from flickr_lite.session import Session
from flickr_lite.utils import get_public_photos_for_user

__all__ = [
    "ApiError",
    "ApiResult",
    "ErrorKind",
    "PersonInfo",
    "SafeSearch",
    "Person",
    "get_person_by_email",
    "get_person_by_username",
    "Photo",
    "Session",
    "get_public_photos_for_user",
]
