"""
POSIX user and group database adapter for identity lookups.
"""

import grp
import logging
import pwd
from typing import Callable, Optional

from typing_extensions import override

from dirlist.exceptions import NameResolutionError
from dirlist.ports.identity.identity_resolver_port import IdentityResolverPort


def _fetch_user(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError) as e:
        raise NameResolutionError(f"no user with id {uid}") from e


def _fetch_group(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except (KeyError, OverflowError) as e:
        raise NameResolutionError(f"no group with id {gid}") from e


class PosixIdentityResolver(IdentityResolverPort):
    """Resolve ids through the ``pwd`` and ``grp`` databases, caching per id."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the resolver with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._users: dict[int, Optional[str]] = {}
        self._groups: dict[int, Optional[str]] = {}

    def _lookup(
        self,
        cache: dict[int, Optional[str]],
        ident: int,
        fetch: Callable[[int], str],
        label: str,
    ) -> Optional[str]:
        if ident in cache:
            return cache[ident]
        try:
            name: Optional[str] = fetch(ident)
        except NameResolutionError as e:
            self._logger.debug(f"Falling back to numeric {label} id: {e}")
            name = None
        cache[ident] = name
        return name

    @override
    def user_name(self, uid: int) -> Optional[str]:
        return self._lookup(self._users, uid, _fetch_user, "user")

    @override
    def group_name(self, gid: int) -> Optional[str]:
        return self._lookup(self._groups, gid, _fetch_group, "group")
