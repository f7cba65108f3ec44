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


import pytest
from squash_resolver import Image, ResolverConfig

from tests.unit import common_images


@pytest.fixture(autouse=True)
def reset_config():
    """Start every test from the default resolver configuration."""
    ResolverConfig.reset()
    yield
    ResolverConfig.reset()


@pytest.fixture
def image() -> Image:
    return common_images.busybox_image()


@pytest.fixture
def empty_image() -> Image:
    """An image whose squashed tree was not computed."""
    return Image(digest="sha256:fedcba9876543210")
