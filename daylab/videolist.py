"""A list of videos loaded from an XML catalogue."""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from collections.abc import Iterator

from .tablemodel import USER_ROLE

logger = logging.getLogger(__name__)

ROLE_NAMES = (
    "name", "date", "director_tag", "director", "actor_tag", "actor",
    "rating_tag", "rating", "desc_tag", "desc", "img", "playpage", "playtimes",
)


def _iter_videos(path: str) -> Iterator[list[str]]:
    """Yield each video's fields in document order.

    Raises FileNotFoundError, OSError, or ValueError on malformed XML after
    yielding the videos that were complete before the error.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"{path} File Not Found!")
    video: list[str] | None = None
    try:
        for event, elem in ET.iterparse(path, events=("start", "end")):
            tag = elem.tag
            if event == "start":
                if tag == "video":
                    video = [elem.get("name", ""), elem.get("date", "")]
                elif video is not None and tag == "poster":
                    video.append(elem.get("img", ""))
                elif video is not None and tag == "page":
                    video.append(elem.get("link", ""))
            elif tag == "video":
                if video is not None:
                    yield video
                video = None
            elif video is not None and tag == "attr":
                video.append(elem.get("tag", ""))
                video.append("".join(elem.itertext()))
            elif video is not None and tag == "playtimes":
                video.append("".join(elem.itertext()))
    except ET.ParseError as exc:
        raise ValueError(str(exc)) from exc


def load_videos(path: str | os.PathLike[str]) -> list[list[str]]:
    """Read every video from the XML file at *path*."""
    return list(_iter_videos(os.fspath(path)))


class VideoListModel:
    """Videos read from an XML file, with per-field roles.

    Load errors are recorded rather than raised; see has_error and
    error_string. Videos read before a parse error are kept.
    """

    def __init__(self, source: str | os.PathLike[str] | None = None) -> None:
        self._source = ""
        self._error = ""
        self._has_error = False
        self._videos: list[list[str]] = []
        if source is not None:
            self.set_source(source)

    @property
    def source(self) -> str:
        """Path of the XML file."""
        return self._source

    def set_source(self, file_path: str | os.PathLike[str]) -> None:
        """Use *file_path* as the catalogue and load it."""
        self._source = os.fspath(file_path)
        self.reload()
        if self._has_error:
            logger.warning("VideoListModel, error = %s", self._error)

    def error_string(self) -> str:
        """Description of the last load error, or ''."""
        return self._error

    def has_error(self) -> bool:
        """Whether the last load failed."""
        return self._has_error

    def reload(self) -> None:
        """Discard the current videos and read the source again."""
        self._has_error = False
        self._error = ""
        self._videos = []
        try:
            for video in _iter_videos(self._source):
                self._videos.append(video)
        except FileNotFoundError as exc:
            self._has_error = True
            self._error = str(exc.args[0]) if exc.args else str(exc)
        except (OSError, ValueError) as exc:
            self._has_error = True
            self._error = str(exc)

    def remove(self, index: int) -> None:
        """Remove the video at *index*."""
        if not 0 <= index < len(self._videos):
            raise IndexError(f"no video at index {index}")
        del self._videos[index]

    def row_count(self) -> int:
        """Number of videos."""
        return len(self._videos)

    def data(self, row: int, role: int) -> str:
        """Return the field of the video at *row* selected by *role*."""
        field = role - USER_ROLE
        if row < 0 or field < 0:
            raise IndexError(f"no field {field} in row {row}")
        return self._videos[row][field]

    def role_names(self) -> dict[int, str]:
        """Map of role numbers to role names."""
        return {USER_ROLE + offset: name for offset, name in enumerate(ROLE_NAMES)}