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


from squash_resolver import errors


def test_resolver_error_brief():
    err = errors.ResolverError(brief="A brief description.")
    assert str(err) == "A brief description."
    assert (
        repr(err)
        == "ResolverError(brief='A brief description.', details=None, resolution=None)"
    )
    assert err.brief == "A brief description."
    assert err.details is None
    assert err.resolution is None


def test_resolver_error_full():
    err = errors.ResolverError(
        brief="Brief", details="Details", resolution="Resolution"
    )
    assert str(err) == "Brief\nDetails\nResolution"
    assert err.brief == "Brief"
    assert err.details == "Details"
    assert err.resolution == "Resolution"


def test_configuration_error():
    err = errors.ConfigurationError("bad value", details="Got -1.")
    assert err.message == "bad value"
    assert err.brief == "Invalid resolver configuration: bad value"
    assert err.details == "Got -1."
    assert err.resolution is None


def test_construction_error():
    err = errors.ConstructionError("no tree")
    assert err.message == "no tree"
    assert err.brief == "Cannot create resolver: no tree"
    assert err.details is None
    assert err.resolution == "Make sure the image squashed tree was computed."


def test_file_tree_error():
    err = errors.FileTreeError("something wrong happened")
    assert err.message == "something wrong happened"
    assert err.brief == "File tree error: something wrong happened"
    assert err.details is None
    assert err.resolution is None


def test_file_catalog_error():
    err = errors.FileCatalogError("something wrong happened")
    assert err.message == "something wrong happened"
    assert err.brief == "File catalog error: something wrong happened"
    assert err.details is None
    assert err.resolution is None


def test_path_lookup_error():
    err = errors.PathLookupError("/etc/passwd", "something wrong happened")
    assert err.path == "/etc/passwd"
    assert err.message == "something wrong happened"
    assert err.brief == "Failed to look up '/etc/passwd': something wrong happened"
    assert err.details is None
    assert err.resolution is None


def test_resolution_error():
    err = errors.ResolutionError("/bin/sh", "circular link chain")
    assert err.path == "/bin/sh"
    assert err.message == "circular link chain"
    assert err.brief == "Failed to resolve link '/bin/sh': circular link chain"
    assert err.details is None
    assert err.resolution == (
        "Check for broken or circular symbolic links in the image."
    )


def test_glob_error():
    err = errors.GlobError("/etc/[a", "unterminated character class")
    assert err.pattern == "/etc/[a"
    assert err.message == "unterminated character class"
    assert err.brief == (
        "Invalid glob pattern '/etc/[a': unterminated character class"
    )
    assert err.details is None
    assert err.resolution is None


def test_not_found_error():
    err = errors.NotFoundError("/bin")
    assert err.path == "/bin"
    assert err.brief == "No contents found for '/bin'."
    assert err.details is None
    assert err.resolution is None


def test_contents_error():
    err = errors.ContentsError({"/usr", "/bin"})
    assert err.paths == ["/bin", "/usr"]
    assert err.brief == "Failed to retrieve file contents."
    assert err.details == "- /bin\n- /usr"
    assert err.resolution is None
    assert str(err) == "Failed to retrieve file contents.\n- /bin\n- /usr"
