"""Utility functions for the Flickr client."""

import logging

from flickr_lite.person import get_person_by_username
from flickr_lite.photo import Photo
from flickr_lite.session import Session

logger = logging.getLogger(__name__)


def get_public_photos_for_user(
    api_key: str, username: str, count: int
) -> list[Photo] | None:
    """Return the latest public photos for a user.

    Args:
        api_key: Flickr API key
        username: Flickr username of the user
        count: Number of photos to return

    Returns:
        Up to count photos, newest first, or None if the user couldn't be
        found or the listing failed
    """
    session = Session(api_key)

    person = get_person_by_username(session, username)
    if person is None:
        logger.warning(f"Could not find user '{username}': {session.last_error}")
        return None

    return person.get_public_photos(per_page=count)
