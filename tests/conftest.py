"""
Shared fixtures.

Nothing here spawns wrangler: the subprocess call is always a Mock returning
a CompletedProcess, and consoles write into StringIO buffers.
"""

from unittest.mock import Mock

import pytest

from d1repl.session import Session, Settings

from .helpers import CapturedUI, d1_response


@pytest.fixture
def session():
    return Session(database="my-database", local=True)


@pytest.fixture
def settings():
    # Inside a package-manager context wrangler is called directly, no lockfile probing.
    return Settings(user_agent="pnpm/9.0.0 node/v20.11.0 linux x64")


@pytest.fixture
def ui():
    return CapturedUI()


@pytest.fixture
def fake_run():
    return Mock(return_value=d1_response({"success": True, "results": [], "meta": {}}))
