"""GIF catalog backed by a static JSON file."""

from pathlib import Path

import logfire
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from feed.domain.model.gif import Gif
from feed.domain.repository.gif import GifRepository
from feed.util.error import ConfigurationError

_GIF_LIST = TypeAdapter(list[Gif])


class JsonGifRepository(GifRepository):
    """GIF catalog loaded once from a JSON array of ``{id, name, url}`` objects."""

    def __init__(self, gifs: list[Gif]) -> None:
        self._gifs = list(gifs)

    @classmethod
    def from_file(cls, path: Path) -> "JsonGifRepository":
        """Load the catalog from ``path``.

        Raises:
            ConfigurationError: If the file is missing or malformed
        """
        try:
            gifs = _GIF_LIST.validate_json(path.read_bytes())
        except OSError as e:
            raise ConfigurationError(f"Cannot read GIF catalog {path}: {e}") from e
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid GIF catalog {path}: {e}") from e

        logfire.info("GIF catalog loaded", path=str(path), count=len(gifs))
        return cls(gifs)

    async def find_all(self) -> list[Gif]:
        """Return every GIF in catalog order."""
        return list(self._gifs)
