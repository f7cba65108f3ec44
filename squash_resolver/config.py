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

"""Global resolver settings to be configured by the application."""

import contextlib
import dataclasses
import logging
from typing import Any, Dict

from squash_resolver.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Same limit as the Linux kernel MAXSYMLINKS.
DEFAULT_MAX_LINK_DEPTH = 40


class _SingletonMeta(type):
    """Keep a single instance per class."""

    _instances: Dict[type, Any] = {}

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        if cls in cls._instances:
            if args or kwargs:
                raise RuntimeError("parameters can only be set once")
            return cls._instances[cls]

        instance = super().__call__(*args, **kwargs)
        cls._instances[cls] = instance
        return instance


@dataclasses.dataclass(frozen=True)
class ResolverConfig(metaclass=_SingletonMeta):
    """Configurable squash resolver settings.

    :cvar max_link_depth: The maximum number of symbolic links followed
        when resolving a path or a link chain.
    :cvar glob_hidden: Whether wildcards match names starting with a dot.
    """

    max_link_depth: int = DEFAULT_MAX_LINK_DEPTH
    glob_hidden: bool = True

    def __post_init__(self) -> None:
        """Validate settings.

        :raises ConfigurationError: If a setting has an invalid value.
        """
        if self.max_link_depth < 1:
            raise ConfigurationError(
                "max_link_depth must be a positive integer",
                details=f"Got {self.max_link_depth!r}.",
            )

    @classmethod
    def reset(cls) -> None:
        """Delete stored class instance."""
        logger.warning("deleting current resolver configuration")
        with contextlib.suppress(KeyError):
            del _SingletonMeta._instances[cls]
