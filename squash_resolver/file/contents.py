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

"""In-memory file content storage."""

import io
import logging
from typing import BinaryIO, Dict, Iterable

from squash_resolver import errors

from .reference import Reference

logger = logging.getLogger(__name__)


class ContentStore:
    """Keep file contents keyed by file reference.

    Every read returns a new stream, owned by the caller.
    """

    def __init__(self) -> None:
        self._contents: Dict[int, bytes] = {}

    def __len__(self) -> int:
        return len(self._contents)

    def put(self, ref: Reference, data: bytes) -> None:
        """Store the contents of a file occurrence."""
        self._contents[ref.id] = bytes(data)

    def has(self, ref: Reference) -> bool:
        """Verify if there are contents stored for the given reference."""
        return ref.id in self._contents

    def read(self, ref: Reference) -> BinaryIO:
        """Open the contents of a file occurrence.

        :param ref: The file reference.

        :returns: A binary stream with the file contents.

        :raises NotFoundError: If there are no contents for the reference.
        """
        if not self.has(ref):
            raise errors.NotFoundError(ref.real_path)

        return io.BytesIO(self._contents[ref.id])

    def read_many(self, refs: Iterable[Reference]) -> Dict[Reference, BinaryIO]:
        """Open the contents of multiple file occurrences.

        Either every reference is opened or none is.

        :param refs: The file references.

        :returns: A dictionary mapping each reference to its contents stream.

        :raises ContentsError: If any reference has no contents.
        """
        refs = list(refs)
        missing = {ref.real_path for ref in refs if not self.has(ref)}
        if missing:
            logger.debug("missing contents: %r", missing)
            raise errors.ContentsError(missing)

        return {ref: self.read(ref) for ref in refs}
