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


"""Resolve files in the squashed filesystem view of container images."""

from . import errors
from .config import ResolverConfig
from .errors import ResolverError
from .file import (
    ContentStore,
    FileCatalog,
    FileMetadata,
    FileType,
    Reference,
    ReferenceSet,
)
from .filetree import FileTree, GlobResult
from .image import Image
from .resolvers import FileResolver, Location, SquashResolver


try:
    from ._version import __version__
except ImportError:  # pragma: no cover
    from importlib.metadata import version, PackageNotFoundError

    try:
        __version__ = version("squash_resolver")
    except PackageNotFoundError:
        __version__ = "dev"


__all__ = [
    "__version__",
    "errors",
    "ContentStore",
    "FileCatalog",
    "FileMetadata",
    "FileResolver",
    "FileTree",
    "FileType",
    "GlobResult",
    "Image",
    "Location",
    "Reference",
    "ReferenceSet",
    "ResolverConfig",
    "ResolverError",
    "SquashResolver",
]
