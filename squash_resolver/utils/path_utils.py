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

"""Utility functions for image paths.

Image paths are always POSIX paths rooted at the image filesystem root,
independently of the host platform.
"""

import posixpath
from typing import List

ROOT = "/"


def normalize(path: str) -> str:
    """Convert a path to its absolute, normalized form.

    Relative paths are anchored at the filesystem root, duplicate separators
    and dot components are collapsed, and ``..`` never climbs above the root.

    :param path: The path to normalize.

    :returns: The normalized absolute path.
    """
    return posixpath.normpath(ROOT + path.lstrip("/"))


def components(path: str) -> List[str]:
    """Split a path into its non-empty components.

    :param path: The path to split.

    :returns: The list of components, empty for the root directory.
    """
    return [part for part in normalize(path).split("/") if part]


def join(parent: str, name: str) -> str:
    """Append a name to a normalized directory path."""
    if parent == ROOT:
        return ROOT + name
    return parent + "/" + name


def link_target_path(link_path: str, target: str) -> str:
    """Obtain the absolute path a symbolic link points to.

    Relative targets are interpreted from the directory containing the link.

    :param link_path: The path of the symbolic link.
    :param target: The link destination, as stored in the link.

    :returns: The normalized absolute path of the link destination.
    """
    if posixpath.isabs(target):
        return normalize(target)
    return normalize(posixpath.join(posixpath.dirname(normalize(link_path)), target))
