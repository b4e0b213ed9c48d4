"""Fixtures for end-to-end tests of the ``slicewise`` command.

Every test runs inside an isolated working directory so flight-recorder
files never land in the user's log directory.
"""

import pytest
from click.testing import CliRunner

from slicewise.entrypoints.cli.main import slicewise

# pylint: disable=redefined-outer-name

LOG_NAME = "commands.log"


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside ``runner.isolated_filesystem()``."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def invoke(runner, fs):
    """Invoke ``slicewise`` with the flight recorder writing to `LOG_NAME`.

    Returns a callable taking the command-line arguments (and optionally an
    ``env`` mapping) and returning the Click ``Result``.
    """

    def _invoke(*args: str, env: dict[str, str] | None = None):
        return runner.invoke(slicewise, ["--log-path", LOG_NAME, *args], env=env)

    return _invoke
