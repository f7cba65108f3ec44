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

"""File resolver for the squashed view of an image."""

import logging
from typing import BinaryIO, Dict, List, Optional

from overrides import overrides

from squash_resolver import errors
from squash_resolver.file import Reference, ReferenceSet
from squash_resolver.filetree import FileTree
from squash_resolver.image import Image
from squash_resolver.utils import path_utils

from .base import FileResolver
from .location import Location

logger = logging.getLogger(__name__)


class SquashResolver(FileResolver):
    """Resolve paths and globs in the squashed filesystem view of an image.

    Each path resolves to the single file occurrence that wins when all
    layers are stacked. Directories are never returned, and symbolic links
    are followed to their terminal file.

    :param image: The image whose squashed view will be queried.

    :raises ConstructionError: If the image squashed tree was not computed.
    """

    def __init__(self, image: Image) -> None:
        if image.squashed_tree is None:
            raise errors.ConstructionError("the image does not have a squashed tree")

        self._image = image
        self._tree: FileTree = image.squashed_tree
        self._refs = ReferenceSet(self._tree.all_references())
        logger.debug("squash resolver for %r: %d references", image, len(self._refs))

    @overrides
    def has_path(self, path: str) -> bool:
        """Verify if the given path exists in the squashed view."""
        return self._tree.has_path(path)

    @overrides
    def has_location(self, location: Location) -> bool:
        """Verify if the given location is part of the squashed view.

        Locations obtained from other resolver perspectives may reference
        file occurrences hidden in the squashed view.
        """
        if location.reference.is_null:
            return False
        return self._refs.contains(location.reference)

    @overrides
    def files_by_path(self, *paths: str) -> List[Location]:
        """Find the files at the given paths in the squashed view.

        Paths that don't exist are skipped. Directories and the root path
        are skipped as well. Symbolic links are resolved, and paths that
        resolve to the same file produce a single location.

        :param paths: The paths to look up.

        :returns: The locations found, in request order.

        :raises PathLookupError: If the tree or the catalog can't be read.
        :raises ResolutionError: If a symbolic link chain is broken or circular.
        """
        unique_refs = ReferenceSet()
        locations: List[Location] = []

        for path in paths:
            logger.debug("resolve path %s", path)
            try:
                ref = self._tree.file(path, follow_basename_links=True)
            except errors.FileTreeError as err:
                raise errors.PathLookupError(path, err.message) from err

            if ref is None:
                continue

            # there is no metadata for the root directory
            if ref.real_path == path_utils.ROOT or self._is_directory(ref, path):
                continue

            resolved = self._resolve_link(ref, path)
            if resolved != ref and self._is_directory(resolved, path):
                continue

            if not unique_refs.contains(resolved):
                unique_refs.add(resolved)
                locations.append(Location(path, resolved, self._image))

        return locations

    @overrides
    def files_by_glob(self, *patterns: str) -> List[Location]:
        """Find the files matching the given glob patterns in the squashed view.

        Each match is resolved as an exact path, so links and directories
        are handled as in :meth:`files_by_path`.

        :param patterns: The glob patterns to match.

        :returns: The locations found, without duplicate files.

        :raises GlobError: If a pattern is malformed.
        :raises PathLookupError: If the tree or the catalog can't be read. The
            path is the pattern when the glob walk itself fails.
        :raises ResolutionError: If a symbolic link chain is broken or circular.
        """
        unique_refs = ReferenceSet()
        locations: List[Location] = []

        for pattern in patterns:
            logger.debug("resolve glob %s", pattern)
            try:
                results = self._tree.files_by_glob(pattern)
            except errors.FileTreeError as err:
                raise errors.PathLookupError(pattern, err.message) from err

            for result in results:
                if result.match_path == path_utils.ROOT:
                    continue
                if self._is_directory(result.reference, result.match_path):
                    continue

                for location in self.files_by_path(result.match_path):
                    if not unique_refs.contains(location.reference):
                        unique_refs.add(location.reference)
                        locations.append(location)

        return locations

    @overrides
    def relative_file_by_path(
        self, location: Location, path: str
    ) -> Optional[Location]:
        """Find a file in the squashed view.

        The squashed view has no notion of layers below a location, so this
        is the same as a single path lookup and ``location`` is not used.

        :returns: The location found, or None if the path doesn't resolve.
        """
        try:
            locations = self.files_by_path(path)
        except errors.ResolverError as err:
            logger.debug("cannot resolve %s relative to %s: %s", path, location, err)
            return None

        if not locations:
            return None

        return locations[0]

    @overrides
    def file_contents_by_location(self, location: Location) -> BinaryIO:
        """Open the contents of the file at a location.

        The caller must close the returned stream.

        :raises NotFoundError: If there are no contents for the location.
        """
        return self._image.file_contents_by_ref(location.reference)

    @overrides
    def multiple_file_contents_by_location(
        self, locations: List[Location]
    ) -> Dict[Location, BinaryIO]:
        """Open the contents of the files at several locations.

        Either all locations are opened or none is. Each location gets its
        own stream, even when several locations refer to the same file. The
        caller must close the returned streams.

        :raises ContentsError: If any location has no contents.
        """
        by_ref: Dict[Reference, List[Location]] = {}
        for location in locations:
            by_ref.setdefault(location.reference, []).append(location)

        contents = self._image.multiple_file_contents_by_ref(list(by_ref))

        streams: Dict[Location, BinaryIO] = {}
        for ref, stream in contents.items():
            first, *others = by_ref[ref]
            streams[first] = stream
            for location in others:
                if location not in streams:
                    streams[location] = self._image.file_contents_by_ref(ref)

        return streams

    def _is_directory(self, ref: Reference, path: str) -> bool:
        if not self._image.file_catalog.exists(ref):
            return False

        try:
            metadata = self._image.file_catalog.get(ref)
        except errors.FileCatalogError as err:
            raise errors.PathLookupError(
                path, f"unable to get file metadata for {ref.real_path!r}: {err.message}"
            ) from err

        return metadata.is_dir

    def _resolve_link(self, ref: Reference, path: str) -> Reference:
        try:
            return self._image.resolve_link_by_image_squash(ref)
        except errors.ResolutionError as err:
            raise errors.ResolutionError(path, err.message) from err
        except errors.FileCatalogError as err:
            raise errors.PathLookupError(path, err.message) from err
