"""
Tests for the DependencyContainer.
"""

from dirlist.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from dirlist.adapters.identity.posix_identity_resolver import PosixIdentityResolver
from dirlist.use_cases.listing.list_directory import ListDirectoryUseCase


class TestDependencyContainer:
    """Test cases for the DependencyContainer."""

    def test_get_list_directory_use_case(self, dependency_container):
        """Test that the use case is wired with the local adapters."""
        use_case = dependency_container.get_list_directory_use_case()

        assert isinstance(use_case, ListDirectoryUseCase)
        assert isinstance(dependency_container.get_entry_collector(), LocalFileSystemAdapter)
        assert isinstance(dependency_container.get_identity_resolver(), PosixIdentityResolver)

    def test_instances_are_cached(self, dependency_container):
        """Test that repeated lookups return the same instance."""
        first = dependency_container.get_list_directory_use_case()
        second = dependency_container.get_list_directory_use_case()

        assert first is second
        assert (
            dependency_container.get_attribute_resolver()
            is dependency_container.get_attribute_resolver()
        )

    def test_reset(self, dependency_container):
        """Test that reset drops cached instances."""
        first = dependency_container.get_entry_collector()
        dependency_container.reset()

        assert dependency_container.get_entry_collector() is not first
