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

"""In-memory file metadata catalog."""

import logging
from typing import Dict

from squash_resolver import errors

from .metadata import FileMetadata
from .reference import Reference

logger = logging.getLogger(__name__)


class FileCatalog:
    """Map file references to their metadata."""

    def __init__(self) -> None:
        self._entries: Dict[int, FileMetadata] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, ref: Reference, metadata: FileMetadata) -> None:
        """Record the metadata of a file occurrence.

        :param ref: The file reference.
        :param metadata: The file metadata.

        :raises FileCatalogError: If the reference is null.
        """
        if ref.is_null:
            raise errors.FileCatalogError(
                f"cannot add metadata for {metadata.path!r} with a null reference"
            )
        logger.debug("catalog %s: %s", ref, metadata.file_type.value)
        self._entries[ref.id] = metadata

    def exists(self, ref: Reference) -> bool:
        """Verify if the catalog has metadata for the given reference."""
        return ref.id in self._entries

    def get(self, ref: Reference) -> FileMetadata:
        """Obtain the metadata for the given reference.

        :param ref: The file reference.

        :returns: The file metadata.

        :raises FileCatalogError: If there is no metadata for the reference.
        """
        try:
            return self._entries[ref.id]
        except KeyError as err:
            raise errors.FileCatalogError(f"no metadata for {ref!r}") from err
