"""
Identity resolver port interface for turning numeric ids into names.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IdentityResolverPort(ABC):
    """Port interface for owner and group name lookups."""

    @abstractmethod
    def user_name(self, uid: int) -> Optional[str]:
        """
        Look up the name of a user id.

        Returns:
            The user name, or None if the id cannot be resolved
        """
        pass

    @abstractmethod
    def group_name(self, gid: int) -> Optional[str]:
        """
        Look up the name of a group id.

        Returns:
            The group name, or None if the id cannot be resolved
        """
        pass
