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

"""Container image view used by file resolvers."""

import logging
from typing import BinaryIO, Dict, Iterable, Optional, Set

from squash_resolver import errors
from squash_resolver.config import ResolverConfig
from squash_resolver.file import (
    ContentStore,
    FileCatalog,
    FileMetadata,
    FileType,
    Reference,
)
from squash_resolver.filetree import FileTree
from squash_resolver.utils import path_utils

logger = logging.getLogger(__name__)


class Image:
    """A container image with its squashed filesystem view.

    The squashed tree is None until it is computed from the image layers;
    entries added through :meth:`add_file`, :meth:`add_directory` and
    :meth:`add_symlink` create it on demand.

    :param digest: The image digest, used for diagnostics only.
    :param squashed_tree: The squashed filesystem view, if already computed.
    :param file_catalog: The metadata of every file occurrence.
    :param contents: The contents of every regular file occurrence.
    """

    def __init__(
        self,
        *,
        digest: str = "",
        squashed_tree: Optional[FileTree] = None,
        file_catalog: Optional[FileCatalog] = None,
        contents: Optional[ContentStore] = None,
    ) -> None:
        self.digest = digest
        self.squashed_tree = squashed_tree
        self.file_catalog = file_catalog or FileCatalog()
        self.contents = contents or ContentStore()

    def __repr__(self) -> str:
        return f"Image(digest={self.digest!r})"

    def add_file(self, path: str, data: bytes = b"", *, mode: int = 0o644) -> Reference:
        """Add a regular file to the squashed view.

        :param path: The file path.
        :param data: The file contents.
        :param mode: The file permissions.

        :returns: The reference of the new file occurrence.
        """
        ref = self._tree().add_file(path)
        self._add_parent_metadata(ref.real_path)
        self.file_catalog.add(
            ref,
            FileMetadata(path=ref.real_path, mode=mode, size=len(data)),
        )
        self.contents.put(ref, data)
        return ref

    def add_directory(self, path: str, *, mode: int = 0o755) -> Reference:
        """Add a directory to the squashed view.

        :param path: The directory path.
        :param mode: The directory permissions.

        :returns: The reference of the directory.
        """
        ref = self._tree().add_directory(path)
        self._add_parent_metadata(ref.real_path)
        if ref.real_path != path_utils.ROOT and not self.file_catalog.exists(ref):
            self.file_catalog.add(
                ref,
                FileMetadata(
                    path=ref.real_path, file_type=FileType.DIRECTORY, mode=mode
                ),
            )
        return ref

    def add_symlink(self, path: str, target: str) -> Reference:
        """Add a symbolic link to the squashed view.

        :param path: The link path.
        :param target: The link destination.

        :returns: The reference of the link.
        """
        ref = self._tree().add_symlink(path, target)
        self._add_parent_metadata(ref.real_path)
        self.file_catalog.add(
            ref,
            FileMetadata(
                path=ref.real_path,
                file_type=FileType.SYMLINK,
                link_destination=target,
                mode=0o777,
            ),
        )
        return ref

    def resolve_link_by_image_squash(self, ref: Reference) -> Reference:
        """Follow a chain of symbolic links in the squashed view.

        :param ref: The reference to resolve.

        :returns: The terminal reference, which is ``ref`` itself if it is
            not a symbolic link.

        :raises ResolutionError: If the chain is broken, circular, or longer
            than the configured maximum.
        """
        tree = self._require_tree()
        max_depth = ResolverConfig().max_link_depth
        visited: Set[int] = set()
        current = ref

        while True:
            if not self.file_catalog.exists(current):
                return current
            metadata = self.file_catalog.get(current)
            if not metadata.is_symlink:
                return current

            if current.id in visited:
                raise errors.ResolutionError(ref.real_path, "circular link chain")
            if len(visited) >= max_depth:
                raise errors.ResolutionError(
                    ref.real_path, f"more than {max_depth} links followed"
                )
            visited.add(current.id)

            target = path_utils.link_target_path(
                current.real_path, metadata.link_destination or ""
            )
            logger.debug("follow link %s -> %s", current.real_path, target)
            try:
                destination = tree.file(target)
            except errors.FileTreeError as err:
                raise errors.ResolutionError(ref.real_path, err.message) from err
            if destination is None:
                raise errors.ResolutionError(
                    ref.real_path, f"link destination {target!r} does not exist"
                )
            current = destination

    def file_contents_by_ref(self, ref: Reference) -> BinaryIO:
        """Open the contents of a file occurrence.

        :raises NotFoundError: If there are no contents for the reference.
        """
        return self.contents.read(ref)

    def multiple_file_contents_by_ref(
        self, refs: Iterable[Reference]
    ) -> Dict[Reference, BinaryIO]:
        """Open the contents of several file occurrences.

        :raises ContentsError: If any reference has no contents.
        """
        return self.contents.read_many(refs)

    def _tree(self) -> FileTree:
        if self.squashed_tree is None:
            self.squashed_tree = FileTree()
        return self.squashed_tree

    def _require_tree(self) -> FileTree:
        if self.squashed_tree is None:
            raise errors.ConstructionError("the image does not have a squashed tree")
        return self.squashed_tree

    def _add_parent_metadata(self, path: str) -> None:
        """Record metadata for parent directories created implicitly."""
        tree = self._tree()
        parent = path_utils.ROOT
        for name in path_utils.components(path)[:-1]:
            parent = path_utils.join(parent, name)
            parent_ref = tree.file(parent)
            if parent_ref is not None and not self.file_catalog.exists(parent_ref):
                self.file_catalog.add(
                    parent_ref,
                    FileMetadata(path=parent, file_type=FileType.DIRECTORY, mode=0o755),
                )
