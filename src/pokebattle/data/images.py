"""Image URL resolution for creature artwork."""
from __future__ import annotations

DEFAULT_IMAGE_URL_TEMPLATE = "https://img.pokemondb.net/artwork/large/{key}.jpg"


class ImageResolver:
    """Turns a creature's reference key into an artwork URL."""

    def __init__(self, url_template: str = DEFAULT_IMAGE_URL_TEMPLATE) -> None:
        if "{key}" not in url_template:
            raise ValueError("Image URL template must contain a '{key}' placeholder.")
        self._url_template = url_template

    def get_image_url(self, reference_key: str) -> str:
        """Return the artwork URL for ``reference_key``."""
        return self._url_template.format(key=reference_key)
