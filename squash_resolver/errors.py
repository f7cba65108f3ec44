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

"""Squash resolver errors."""

import dataclasses
from typing import Iterable, List, Optional


@dataclasses.dataclass(repr=True)
class ResolverError(Exception):
    """Unexpected error.

    :param brief: Brief description of error.
    :param details: Detailed information.
    :param resolution: Recommendation, if any.
    """

    brief: str
    details: Optional[str] = None
    resolution: Optional[str] = None

    def __str__(self) -> str:
        components = [self.brief]

        if self.details:
            components.append(self.details)

        if self.resolution:
            components.append(self.resolution)

        return "\n".join(components)


class ConfigurationError(ResolverError):
    """The resolver configuration is invalid.

    :param message: The error message.
    """

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        self.message = message
        brief = f"Invalid resolver configuration: {message}"

        super().__init__(brief=brief, details=details)


class ConstructionError(ResolverError):
    """A resolver could not be created for an image.

    :param message: The error message.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        brief = f"Cannot create resolver: {message}"
        resolution = "Make sure the image squashed tree was computed."

        super().__init__(brief=brief, resolution=resolution)


class FileTreeError(ResolverError):
    """The squashed file tree could not be accessed.

    :param message: The error message.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        brief = f"File tree error: {message}"

        super().__init__(brief=brief)


class FileCatalogError(ResolverError):
    """The file catalog could not be accessed.

    :param message: The error message.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        brief = f"File catalog error: {message}"

        super().__init__(brief=brief)


class PathLookupError(ResolverError):
    """Failed to look up a path in the tree or the file catalog.

    :param path: The path being looked up.
    :param message: The error message.
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        brief = f"Failed to look up {path!r}: {message}"

        super().__init__(brief=brief)


class ResolutionError(ResolverError):
    """A symbolic link chain could not be resolved.

    :param path: The path whose link chain failed to resolve.
    :param message: The error message.
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        brief = f"Failed to resolve link {path!r}: {message}"
        resolution = "Check for broken or circular symbolic links in the image."

        super().__init__(brief=brief, resolution=resolution)


class GlobError(ResolverError):
    """A glob pattern is invalid.

    :param pattern: The invalid glob pattern.
    :param message: The error message.
    """

    def __init__(self, pattern: str, message: str) -> None:
        self.pattern = pattern
        self.message = message
        brief = f"Invalid glob pattern {pattern!r}: {message}"

        super().__init__(brief=brief)


class NotFoundError(ResolverError):
    """There is no content backing a file reference.

    :param path: The real path of the file reference.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        brief = f"No contents found for {path!r}."

        super().__init__(brief=brief)


class ContentsError(ResolverError):
    """Contents of one or more files could not be retrieved.

    :param paths: The paths of the files that could not be read.
    """

    def __init__(self, paths: Iterable[str]) -> None:
        self.paths: List[str] = sorted(paths)
        brief = "Failed to retrieve file contents."
        details = "\n".join(f"- {path}" for path in self.paths)

        super().__init__(brief=brief, details=details)
