# -*- Mode:Python; indent-tabs-mode:nil; tab-width:4 -*-
#
# Copyright 2026 Canonical Ltd.
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License version 3 as published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""File metadata definitions."""

import enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, model_validator
from typing_extensions import Self


@enum.unique
class FileType(enum.Enum):
    """The type of a filesystem entry."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    HARDLINK = "hardlink"
    CHAR_DEVICE = "char-device"
    BLOCK_DEVICE = "block-device"
    FIFO = "fifo"
    SOCKET = "socket"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.{self.name}"


class FileMetadata(BaseModel):
    """Metadata of a file occurrence, as stored in the file catalog."""

    path: str
    file_type: FileType = FileType.REGULAR
    link_destination: Optional[str] = None
    mode: int = 0o644
    size: int = 0
    user_id: int = 0
    group_id: int = 0

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=lambda s: s.replace("_", "-"),
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _validate_link_destination(self) -> Self:
        """Only link entries carry a link destination."""
        is_link = self.file_type in (FileType.SYMLINK, FileType.HARDLINK)
        if is_link and not self.link_destination:
            raise ValueError(f"link {self.path!r} must have a link destination")
        if not is_link and self.link_destination is not None:
            raise ValueError(f"{self.path!r} is not a link")
        return self

    @property
    def is_dir(self) -> bool:
        """Whether the file is a directory."""
        return self.file_type == FileType.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        """Whether the file is a symbolic link."""
        return self.file_type == FileType.SYMLINK

    @classmethod
    def unmarshal(cls, data: Dict[str, Any]) -> "FileMetadata":
        """Create and populate a new metadata object from dictionary data.

        :param data: A dictionary containing the data to unmarshal.

        :returns: The metadata object.
        """
        return cls.model_validate(data)

    def marshal(self) -> Dict[str, Any]:
        """Create a dictionary containing the file metadata.

        :returns: The newly created dictionary.
        """
        return self.model_dump(mode="json", by_alias=True)
