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

"""File references and reference sets."""

import dataclasses
from typing import Dict, Iterable, Iterator, Optional

NULL_REFERENCE_ID = 0


@dataclasses.dataclass(frozen=True)
class Reference:
    """The identity of one concrete file occurrence in a file tree.

    References are compared by identity only: two references with different
    paths but the same id denote the same file occurrence.

    :param id: The file occurrence identity. Zero means no file.
    :param real_path: The path of the file occurrence, with links resolved.
    """

    id: int
    real_path: str = dataclasses.field(default="", compare=False)

    def __repr__(self) -> str:
        return f"Reference(id={self.id}, real_path={self.real_path!r})"

    @property
    def is_null(self) -> bool:
        """Whether this reference does not point to any file."""
        return self.id == NULL_REFERENCE_ID


class ReferenceSet:
    """A set of file references with membership by identity.

    :param references: The initial set members.
    """

    def __init__(self, references: Optional[Iterable[Reference]] = None) -> None:
        self._refs: Dict[int, Reference] = {}
        for ref in references or []:
            self.add(ref)

    def __repr__(self) -> str:
        return f"ReferenceSet({list(self._refs.values())!r})"

    def __len__(self) -> int:
        return len(self._refs)

    def __iter__(self) -> Iterator[Reference]:
        return iter(list(self._refs.values()))

    def __contains__(self, ref: object) -> bool:
        if not isinstance(ref, Reference):
            return False
        return self.contains(ref)

    def add(self, ref: Reference) -> None:
        """Add a reference to the set. Null references are ignored."""
        if ref.is_null:
            return
        self._refs.setdefault(ref.id, ref)

    def contains(self, ref: Reference) -> bool:
        """Verify if a file occurrence is a member of this set.

        :param ref: The reference to verify.

        :returns: Whether the reference is in the set. Null references
            are never members.
        """
        if ref.is_null:
            return False
        return ref.id in self._refs
