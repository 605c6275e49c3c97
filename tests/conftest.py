"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from dirlist.container import DependencyContainer
from dirlist.ports.identity.identity_resolver_port import IdentityResolverPort


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing listings.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # A dot-prefixed file that is hidden unless show_all is set
        with open(os.path.join(temp_dir, ".hidden"), "w") as f:
            f.write("secret")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def mock_identity_resolver():
    """
    Identity resolver port double that knows uid/gid 0 and nothing else.
    """
    resolver = MagicMock(spec=IdentityResolverPort)
    resolver.user_name.side_effect = lambda uid: "root" if uid == 0 else None
    resolver.group_name.side_effect = lambda gid: "wheel" if gid == 0 else None
    return resolver


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
