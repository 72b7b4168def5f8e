"""A photo as returned by Flickr photo listings."""

from typing import TYPE_CHECKING, Any, Mapping

if TYPE_CHECKING:
    from flickr_lite.person import Person

IMAGE_URL_TEMPLATE = "http://farm{farm}.static.flickr.com/{server}/{id}_{secret}{suffix}.jpg"
PAGE_URL_TEMPLATE = "http://www.flickr.com/photos/{owner_id}/{id}"


def _flag(value: Any) -> bool:
    try:
        return int(value) != 0
    except (TypeError, ValueError):
        return bool(value)


class Photo:
    """A photo on Flickr.

    Data fields are copied verbatim from the listing response and never
    change. The owner is assigned once by the listing that produced it.
    """

    def __init__(
        self,
        id: str,
        title: str,
        farm: Any,
        server: str,
        secret: str,
        ispublic: Any,
        isfriend: Any,
        isfamily: Any,
    ) -> None:
        self._id = id
        self._title = title
        self._farm = farm
        self._server = server
        self._secret = secret
        self._ispublic = ispublic
        self._isfriend = isfriend
        self._isfamily = isfamily
        self._owner: "Person | None" = None

    @classmethod
    def from_dict(cls, properties: Mapping[str, Any]) -> "Photo":
        """Build a photo from one entry of a photos.photo list.

        Raises:
            KeyError: If a required field is missing
        """
        return cls(
            id=properties["id"],
            title=properties["title"],
            farm=properties["farm"],
            server=properties["server"],
            secret=properties["secret"],
            ispublic=properties["ispublic"],
            isfriend=properties["isfriend"],
            isfamily=properties["isfamily"],
        )

    def __repr__(self) -> str:
        return f"Photo(id={self._id!r}, title={self._title!r})"

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def farm(self) -> Any:
        return self._farm

    @property
    def server(self) -> str:
        return self._server

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def is_public(self) -> bool:
        return _flag(self._ispublic)

    @property
    def is_friend(self) -> bool:
        return _flag(self._isfriend)

    @property
    def is_family(self) -> bool:
        return _flag(self._isfamily)

    @property
    def owner(self) -> "Person | None":
        return self._owner

    def set_owner(self, person: "Person") -> None:
        self._owner = person

    def _image_url(self, suffix: str) -> str:
        return IMAGE_URL_TEMPLATE.format(
            farm=self._farm,
            server=self._server,
            id=self._id,
            secret=self._secret,
            suffix=suffix,
        )

    @property
    def small_square_url(self) -> str:
        """75x75 pixel square image."""
        return self._image_url("_s")

    @property
    def thumbnail_url(self) -> str:
        """Image 100 pixels on the longest side."""
        return self._image_url("_t")

    @property
    def small_url(self) -> str:
        """Image 240 pixels on the longest side."""
        return self._image_url("_m")

    @property
    def medium_url(self) -> str:
        """Image 500 pixels on the longest side."""
        return self._image_url("")

    @property
    def url(self) -> str | None:
        """URL of the photo's page on Flickr, or None if it has no owner."""
        if self._owner is None:
            return None
        return PAGE_URL_TEMPLATE.format(owner_id=self._owner.id, id=self._id)
