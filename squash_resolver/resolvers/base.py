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

"""Base class for image file resolvers."""

import abc
from typing import BinaryIO, Dict, List, Optional

from .location import Location


class FileResolver(abc.ABC):
    """The capabilities shared by all image file resolvers.

    Each resolver answers queries from one perspective of the image
    filesystem. Locations are only meaningful to the resolver perspective
    that created them.
    """

    @abc.abstractmethod
    def has_path(self, path: str) -> bool:
        """Verify if the given path exists in this perspective."""

    @abc.abstractmethod
    def has_location(self, location: Location) -> bool:
        """Verify if the given location belongs to this perspective."""

    @abc.abstractmethod
    def files_by_path(self, *paths: str) -> List[Location]:
        """Find the files at the given paths.

        :param paths: The paths to look up.

        :returns: The locations found, without duplicate files.
        """

    @abc.abstractmethod
    def files_by_glob(self, *patterns: str) -> List[Location]:
        """Find the files matching the given glob patterns.

        :param patterns: The glob patterns to match.

        :returns: The locations found, without duplicate files.
        """

    @abc.abstractmethod
    def relative_file_by_path(
        self, location: Location, path: str
    ) -> Optional[Location]:
        """Find a file relative to the perspective of another location.

        :param location: The location giving the lookup context.
        :param path: The path to look up.

        :returns: The location found, or None.
        """

    @abc.abstractmethod
    def file_contents_by_location(self, location: Location) -> BinaryIO:
        """Open the contents of the file at a location."""

    @abc.abstractmethod
    def multiple_file_contents_by_location(
        self, locations: List[Location]
    ) -> Dict[Location, BinaryIO]:
        """Open the contents of the files at several locations."""
