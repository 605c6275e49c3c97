"""
Dependency injection container for managing application dependencies.
"""

import logging

from dirlist.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from dirlist.adapters.identity.posix_identity_resolver import PosixIdentityResolver
from dirlist.config.settings import settings
from dirlist.ports.files.entry_collector_port import EntryCollectorPort
from dirlist.ports.identity.identity_resolver_port import IdentityResolverPort
from dirlist.use_cases.listing.list_directory import ListDirectoryUseCase
from dirlist.use_cases.listing.resolve_attributes import AttributeResolver


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_entry_collector(self) -> EntryCollectorPort:
        """
        Get entry collector adapter instance.

        Returns:
            EntryCollectorPort implementation
        """
        if "entry_collector" not in self._instances:
            self._instances["entry_collector"] = LocalFileSystemAdapter(self._logger)
        return self._instances["entry_collector"]

    def get_identity_resolver(self) -> IdentityResolverPort:
        """
        Get identity resolver adapter instance.

        Returns:
            IdentityResolverPort implementation
        """
        if "identity_resolver" not in self._instances:
            self._instances["identity_resolver"] = PosixIdentityResolver(self._logger)
        return self._instances["identity_resolver"]

    def get_attribute_resolver(self) -> AttributeResolver:
        """
        Get attribute resolver with injected dependencies.

        Returns:
            Configured AttributeResolver
        """
        if "attribute_resolver" not in self._instances:
            identity_resolver = self.get_identity_resolver()
            self._instances["attribute_resolver"] = AttributeResolver(
                identity_resolver, self._logger
            )
        return self._instances["attribute_resolver"]

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        """
        Get list directory use case with injected dependencies.

        Returns:
            Configured ListDirectoryUseCase
        """
        if "list_directory_use_case" not in self._instances:
            self._instances["list_directory_use_case"] = ListDirectoryUseCase(
                self.get_entry_collector(),
                self.get_attribute_resolver(),
                self._logger,
                time_format=settings.time_format,
            )
        return self._instances["list_directory_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
