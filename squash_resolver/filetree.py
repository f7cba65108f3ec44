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

"""In-memory squashed file tree.

The tree holds the winning entry of each path after all layers of an image
were stacked. It only records structure: directories, files and symbolic
link destinations. File metadata and contents are kept elsewhere, keyed by
the :class:`Reference` assigned to each entry.
"""

import dataclasses
import itertools
import logging
from fnmatch import fnmatchcase
from typing import Dict, Iterator, List, NamedTuple, Optional, Set, Tuple

from squash_resolver import errors
from squash_resolver.config import ResolverConfig
from squash_resolver.file import Reference
from squash_resolver.utils import path_utils

logger = logging.getLogger(__name__)

_RECURSIVE_WILDCARD = "**"


class GlobResult(NamedTuple):
    """A path matched by a glob pattern and the entry it denotes."""

    match_path: str
    reference: Reference


@dataclasses.dataclass
class _Node:
    reference: Reference
    link_target: Optional[str] = None
    children: Optional[Dict[str, "_Node"]] = None

    @property
    def is_dir(self) -> bool:
        return self.children is not None

    @property
    def is_link(self) -> bool:
        return self.link_target is not None


class FileTree:
    """The squashed view of an image filesystem."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._root = _Node(self._new_reference(path_utils.ROOT), children={})

    def __repr__(self) -> str:
        return f"FileTree(entries={len(self.all_references())})"

    @property
    def root(self) -> Reference:
        """Return the reference of the root directory."""
        return self._root.reference

    def add_file(self, path: str) -> Reference:
        """Add a regular file, replacing any entry with the same path.

        :param path: The file path.

        :returns: The reference of the new entry.

        :raises FileTreeError: If the path can't be added to the tree.
        """
        return self._add(path, _Node(Reference(0)))

    def add_directory(self, path: str) -> Reference:
        """Add a directory. Existing directories are kept.

        :param path: The directory path.

        :returns: The reference of the directory.

        :raises FileTreeError: If the path can't be added to the tree.
        """
        path = path_utils.normalize(path)
        if path == path_utils.ROOT:
            return self._root.reference

        parent = self._ensure_parent(path)
        name = path_utils.components(path)[-1]
        existing = parent.children.get(name)  # type: ignore[union-attr]
        if existing is not None and existing.is_dir:
            return existing.reference

        return self._add(path, _Node(Reference(0), children={}))

    def add_symlink(self, path: str, target: str) -> Reference:
        """Add a symbolic link, replacing any entry with the same path.

        :param path: The link path.
        :param target: The link destination, absolute or relative to the
            directory containing the link.

        :returns: The reference of the new entry.

        :raises FileTreeError: If the path can't be added to the tree.
        """
        if not target:
            raise errors.FileTreeError(f"symbolic link {path!r} has no destination")
        return self._add(path, _Node(Reference(0), link_target=target))

    def has_path(self, path: str) -> bool:
        """Verify if the given path exists in the tree.

        Links in the leading path components are followed, a link in the
        final component is not.
        """
        try:
            return self._walk(path, follow_basename_links=False, depth=0) is not None
        except errors.FileTreeError as err:
            logger.debug("path %s not reachable: %s", path, err.message)
            return False

    def file(
        self, path: str, *, follow_basename_links: bool = False
    ) -> Optional[Reference]:
        """Find the entry at the given path.

        Links in the leading path components are always followed. When
        ``follow_basename_links`` is set and the final component is a link,
        the link chain is followed until an entry that is not a link. If the
        chain is dangling or circular, the last link reached is returned.

        :param path: The path to look up.
        :param follow_basename_links: Whether to follow a link in the final
            path component.

        :returns: The entry reference, or None if the path doesn't exist.

        :raises FileTreeError: If too many links were followed.
        """
        node = self._walk(path, follow_basename_links=follow_basename_links, depth=0)
        if node is None:
            return None
        return node.reference

    def files_by_glob(self, pattern: str) -> List[GlobResult]:
        """Find all entries whose path matches a glob pattern.

        Wildcards ``*``, ``?`` and character classes match within a single
        path component, ``**`` matches any number of directories. Relative
        patterns are anchored at the root. A link matched by a pattern
        component is followed when more components come after it. ``**``
        matches links but does not descend through them.

        :param pattern: The glob pattern.

        :returns: The matches, sorted by path.

        :raises GlobError: If the pattern is malformed.
        :raises FileTreeError: If too many links were followed.
        """
        parts = _parse_pattern(pattern)
        matches: Dict[str, Reference] = {}
        self._match(self._root, path_utils.ROOT, parts, matches)
        logger.debug("glob %s matched %d entries", pattern, len(matches))
        return [GlobResult(path, ref) for path, ref in sorted(matches.items())]

    def all_references(self) -> List[Reference]:
        """Return the references of every entry in the tree, root included."""
        return [node.reference for node in self._nodes()]

    def _new_reference(self, path: str) -> Reference:
        return Reference(next(self._ids), real_path=path)

    def _add(self, path: str, node: _Node) -> Reference:
        path = path_utils.normalize(path)
        if path == path_utils.ROOT:
            raise errors.FileTreeError("cannot replace the root directory")

        parent = self._ensure_parent(path)
        node.reference = self._new_reference(path)
        name = path_utils.components(path)[-1]
        parent.children[name] = node  # type: ignore[index]
        logger.debug("add %s as %r", path, node.reference)
        return node.reference

    def _ensure_parent(self, path: str) -> _Node:
        node = self._root
        current = path_utils.ROOT
        for name in path_utils.components(path)[:-1]:
            current = path_utils.join(current, name)
            child = node.children.get(name)  # type: ignore[union-attr]
            if child is None:
                child = _Node(self._new_reference(current), children={})
                node.children[name] = child  # type: ignore[index]
            elif not child.is_dir:
                raise errors.FileTreeError(f"{current!r} is not a directory")
            node = child
        return node

    def _walk(
        self, path: str, *, follow_basename_links: bool, depth: int
    ) -> Optional[_Node]:
        names = path_utils.components(path)
        node = self._root
        current = path_utils.ROOT

        for index, name in enumerate(names):
            if not node.is_dir:
                return None
            child = node.children.get(name)  # type: ignore[union-attr]
            if child is None:
                return None
            current = path_utils.join(current, name)
            if child.is_link and index < len(names) - 1:
                child = self._follow(current, child, depth)
                if child is None:
                    return None
                current = child.reference.real_path
            node = child

        if follow_basename_links:
            node = self._follow_basename(node, depth)

        return node

    def _follow_basename(self, node: _Node, depth: int) -> _Node:
        # stop at the last link reached if the chain is dangling or circular
        visited: Set[int] = set()
        while node.is_link:
            if node.reference.id in visited:
                break
            if len(visited) >= ResolverConfig().max_link_depth:
                break
            visited.add(node.reference.id)
            target = path_utils.link_target_path(
                node.reference.real_path, node.link_target or ""
            )
            destination = self._walk(target, follow_basename_links=False, depth=depth)
            if destination is None:
                break
            node = destination
        return node

    def _follow(self, path: str, node: _Node, depth: int) -> Optional[_Node]:
        current: Optional[_Node] = node
        while current is not None and current.is_link:
            depth = self._check_depth(path, depth + 1)
            target = path_utils.link_target_path(
                current.reference.real_path, current.link_target or ""
            )
            current = self._walk(target, follow_basename_links=False, depth=depth)
        return current

    def _check_depth(self, path: str, depth: int) -> int:
        if depth > ResolverConfig().max_link_depth:
            raise errors.FileTreeError(f"too many levels of symbolic links in {path!r}")
        return depth

    def _match(
        self, node: _Node, path: str, parts: List[str], matches: Dict[str, Reference]
    ) -> None:
        if not parts:
            matches[path] = node.reference
            return

        if node.is_link:
            resolved = self._follow(path, node, 0)
            if resolved is None:
                return
            node = resolved

        part, rest = parts[0], parts[1:]
        if part == _RECURSIVE_WILDCARD:
            self._match(node, path, rest, matches)
            for name, child in self._children(node):
                if _is_hidden(name, part):
                    continue
                child_path = path_utils.join(path, name)
                if child.is_link:
                    if not rest:
                        matches[child_path] = child.reference
                    continue
                self._match(child, child_path, parts, matches)
            return

        for name, child in self._children(node):
            if _is_hidden(name, part) or not fnmatchcase(name, part):
                continue
            self._match(child, path_utils.join(path, name), rest, matches)

    @staticmethod
    def _children(node: _Node) -> List[Tuple[str, _Node]]:
        if not node.is_dir:
            return []
        return sorted(node.children.items())  # type: ignore[union-attr]

    def _nodes(self) -> Iterator[_Node]:
        pending = [self._root]
        while pending:
            node = pending.pop()
            yield node
            if node.is_dir:
                pending.extend(node.children.values())  # type: ignore[union-attr]


def _is_hidden(name: str, part: str) -> bool:
    """Verify if a dot name must be skipped by a wildcard pattern component."""
    if ResolverConfig().glob_hidden:
        return False
    return name.startswith(".") and not part.startswith(".")


def _parse_pattern(pattern: str) -> List[str]:
    """Split a glob pattern into components and validate them.

    :param pattern: The glob pattern to parse.

    :returns: The list of pattern components.

    :raises GlobError: If the pattern is malformed.
    """
    if not pattern.strip():
        raise errors.GlobError(pattern, "pattern is empty")

    parts = [part for part in pattern.split("/") if part and part != "."]
    for part in parts:
        if part == "..":
            raise errors.GlobError(pattern, "parent directory references not allowed")
        if _RECURSIVE_WILDCARD in part and part != _RECURSIVE_WILDCARD:
            raise errors.GlobError(
                pattern, "'**' can only be used as a whole path component"
            )
        if not _brackets_closed(part):
            raise errors.GlobError(pattern, f"unterminated character class in {part!r}")

    return parts


def _brackets_closed(part: str) -> bool:
    index = 0
    while index < len(part):
        if part[index] != "[":
            index += 1
            continue
        end = index + 1
        if end < len(part) and part[end] == "!":
            end += 1
        # a leading ']' is a literal member of the class
        if end < len(part) and part[end] == "]":
            end += 1
        while end < len(part) and part[end] != "]":
            end += 1
        if end >= len(part):
            return False
        index = end + 1
    return True
