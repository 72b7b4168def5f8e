"""Flickr people: lookups, lazily fetched profile data and photo listings."""

import logging
from typing import Any, Iterable

from flickr_lite.models import PersonInfo, SafeSearch
from flickr_lite.photo import Photo
from flickr_lite.session import Session

logger = logging.getLogger(__name__)


def _content(node: dict[str, Any], key: str) -> Any:
    """Return node[key]["_content"], or None when the service omitted it."""
    value = node.get(key)
    if isinstance(value, dict):
        return value.get("_content")
    return value


class Person:
    """A Flickr user.

    Instances come from get_person_by_email() or get_person_by_username().
    Profile fields are fetched together on first access. A failed fetch
    leaves them unloaded so the next access tries again.
    """

    def __init__(self, session: Session, user_id: str, username: str) -> None:
        self._session = session
        self._user_id = user_id
        self._username = username
        self._info: PersonInfo | None = None

    def __repr__(self) -> str:
        return f"Person(id={self._user_id!r}, username={self._username!r})"

    @property
    def id(self) -> str:
        return self._user_id

    @property
    def username(self) -> str:
        return self._username

    @property
    def session(self) -> Session:
        return self._session

    @property
    def is_loaded(self) -> bool:
        """Whether the profile fields have been fetched."""
        return self._info is not None

    def _load_info(self) -> PersonInfo | None:
        if self._info is None:
            result = self._session.request(
                "flickr.people.getInfo", {"user_id": self.id}, expect="person.nsid"
            )
            if result.success:
                person = result.data["person"]
                self._info = PersonInfo(
                    real_name=_content(person, "realname"),
                    location=_content(person, "location"),
                    photos_url=_content(person, "photosurl"),
                    profile_url=_content(person, "profileurl"),
                )
                logger.debug(f"Loaded profile for {self.id}")
        return self._info

    @property
    def real_name(self) -> str | None:
        info = self._load_info()
        return info.real_name if info else None

    @property
    def location(self) -> str | None:
        info = self._load_info()
        return info.location if info else None

    @property
    def photos_url(self) -> str | None:
        """URL prefix for the person's photos."""
        info = self._load_info()
        return info.photos_url if info else None

    @property
    def profile_url(self) -> str | None:
        """URL prefix for the person's profile."""
        info = self._load_info()
        return info.profile_url if info else None

    def get_public_photos(
        self,
        per_page: int | None = None,
        page: int | None = None,
        safe_search: SafeSearch | int | None = None,
        extras: str | Iterable[str] | None = None,
    ) -> list[Photo] | None:
        """List the person's public photos.

        Args:
            per_page: Number of photos per page
            page: Page number to return
            safe_search: Content filtering level
            extras: Extra fields to return, comma separated or as an iterable

        Returns:
            Photos in the order returned by Flickr, each owned by this
            person, or None if the call failed
        """
        params: dict[str, Any] = {"user_id": self.id}
        if per_page is not None:
            params["per_page"] = per_page
        if page is not None:
            params["page"] = page
        if safe_search is not None:
            params["safe_search"] = int(safe_search)
        if extras is not None:
            params["extras"] = extras if isinstance(extras, str) else ",".join(extras)

        result = self._session.request(
            "flickr.people.getPublicPhotos", params, expect="photos.photo"
        )
        if not result.success:
            return None

        photos = []
        for entry in result.data["photos"]["photo"]:
            photo = Photo.from_dict(entry)
            photo.set_owner(self)
            photos.append(photo)

        logger.info(f"Found {len(photos)} public photo(s) for {self.username}")
        return photos


def _person_from_result(session: Session, data: dict[str, Any]) -> Person:
    user = data["user"]
    person = Person(session, user["nsid"], _content(user, "username"))
    logger.info(f"Found person {person.username} with ID: {person.id}")
    return person


def get_person_by_email(session: Session, email: str) -> Person | None:
    """Look up a person by email address.

    Returns:
        The person, or None if the lookup failed (see session.last_error)
    """
    result = session.request(
        "flickr.people.findByEmail", {"find_email": email}, expect="user.nsid"
    )
    if not result.success:
        return None
    return _person_from_result(session, result.data)


def get_person_by_username(session: Session, username: str) -> Person | None:
    """Look up a person by Flickr username.

    Returns:
        The person, or None if the lookup failed (see session.last_error)
    """
    result = session.request(
        "flickr.people.findByUsername", {"username": username}, expect="user.nsid"
    )
    if not result.success:
        return None
    return _person_from_result(session, result.data)
