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


import pydantic
import pytest
from squash_resolver.file import FileMetadata, FileType


def test_defaults():
    metadata = FileMetadata(path="/etc/passwd")

    assert metadata.file_type == FileType.REGULAR
    assert metadata.link_destination is None
    assert metadata.mode == 0o644
    assert metadata.size == 0
    assert metadata.is_dir is False
    assert metadata.is_symlink is False


def test_directory():
    metadata = FileMetadata(path="/etc", file_type=FileType.DIRECTORY)

    assert metadata.is_dir is True
    assert metadata.is_symlink is False


def test_symlink():
    metadata = FileMetadata(
        path="/bin/sh", file_type=FileType.SYMLINK, link_destination="busybox"
    )

    assert metadata.is_dir is False
    assert metadata.is_symlink is True


def test_symlink_without_destination():
    with pytest.raises(pydantic.ValidationError) as raised:
        FileMetadata(path="/bin/sh", file_type=FileType.SYMLINK)

    assert "link '/bin/sh' must have a link destination" in str(raised.value)


def test_destination_without_link():
    with pytest.raises(pydantic.ValidationError) as raised:
        FileMetadata(path="/etc/passwd", link_destination="/etc/shadow")

    assert "'/etc/passwd' is not a link" in str(raised.value)


def test_frozen():
    metadata = FileMetadata(path="/etc/passwd")

    with pytest.raises(pydantic.ValidationError):
        metadata.mode = 0o600  # type: ignore[misc]


def test_extra_fields_forbidden():
    with pytest.raises(pydantic.ValidationError):
        FileMetadata.unmarshal({"path": "/etc/passwd", "color": "blue"})


def test_marshal_unmarshal():
    data = {
        "path": "/bin/sh",
        "file-type": "symlink",
        "link-destination": "busybox",
        "mode": 511,
        "size": 0,
        "user-id": 0,
        "group-id": 0,
    }

    metadata = FileMetadata.unmarshal(data)

    assert metadata.file_type == FileType.SYMLINK
    assert metadata.link_destination == "busybox"
    assert metadata.marshal() == data


def test_file_type_repr():
    assert repr(FileType.DIRECTORY) == "FileType.DIRECTORY"
