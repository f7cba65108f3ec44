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


"""Images shared by resolver tests."""

from squash_resolver import Image


def busybox_image() -> Image:
    """Create a small image resembling a busybox-based distribution.

    The squashed view contains:

    - ``/bin/busybox``, a regular file, with ``/bin/sh`` linking to it
      and ``/bin/ash`` linking to ``/bin/sh``
    - ``/etc/a.conf`` and ``/etc/b.conf`` linking to it
    - ``/etc/os-release``
    - ``/usr/lib/libc.so`` and ``/lib`` linking to ``usr/lib``
    """
    image = Image(digest="sha256:0123456789abcdef")
    image.add_directory("/bin")
    image.add_file("/bin/busybox", b"busybox binary", mode=0o755)
    image.add_symlink("/bin/sh", "busybox")
    image.add_symlink("/bin/ash", "/bin/sh")
    image.add_file("/etc/a.conf", b"a=1\n")
    image.add_symlink("/etc/b.conf", "a.conf")
    image.add_file("/etc/os-release", b"ID=busybox\n")
    image.add_file("/usr/lib/libc.so", b"libc")
    image.add_symlink("/lib", "usr/lib")
    return image
