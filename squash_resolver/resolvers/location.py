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

"""Resolved file locations."""

import dataclasses
from typing import TYPE_CHECKING

from squash_resolver.file import Reference

if TYPE_CHECKING:
    from squash_resolver.image import Image


@dataclasses.dataclass(frozen=True)
class Location:
    """A file found by a resolver.

    :param request_path: The path, or glob match, that produced this location.
    :param reference: The terminal file reference, with links resolved.
    :param image: The image the file belongs to.
    """

    request_path: str
    reference: Reference
    image: "Image" = dataclasses.field(compare=False, repr=False)

    def __str__(self) -> str:
        if self.request_path == self.real_path:
            return self.request_path
        return f"{self.request_path} -> {self.real_path}"

    @property
    def virtual_path(self) -> str:
        """Return the path as requested by the caller."""
        return self.request_path

    @property
    def real_path(self) -> str:
        """Return the path of the resolved file occurrence."""
        return self.reference.real_path
