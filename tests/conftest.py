"""
Pytest configuration and shared fixtures.
"""

import json
import logging
import sys
from concurrent.futures import Future
from pathlib import Path

import pytest

# Add the project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ray_client import Ray
from ray_comm import RayComm


def reject_constant(name):
    raise ValueError(f"non-standard JSON constant {name}")


class FakeSession:
    """Stands in for ``requests.Session`` and records every post."""

    def __init__(self, error=None):
        self.posts = []
        self.error = error

    def post(self, url, data=None, headers=None, timeout=None):
        self.posts.append({
            "url": url,
            "body": json.loads(data.decode("utf-8"), parse_constant=reject_constant),
            "headers": headers,
            "timeout": timeout,
        })
        if self.error is not None:
            raise self.error


class InlineExecutor:
    """Runs submitted work immediately so posts are visible to assertions."""

    def submit(self, fn, *args, **kwargs):
        future = Future()
        future.set_result(fn(*args, **kwargs))
        return future


# =============================================================================
# TRANSPORT FIXTURES
# =============================================================================

@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def comm(fake_session):
    """RayComm that posts synchronously into ``fake_session``."""
    return RayComm(session=fake_session, executor=InlineExecutor())


@pytest.fixture
def ray_session(comm):
    return Ray(client=comm)


@pytest.fixture
def bodies(fake_session):
    """Return a callable listing the request bodies posted so far."""
    return lambda: [post["body"] for post in fake_session.posts]


@pytest.fixture(autouse=True)
def restore_ray_logger():
    """Undo handler and propagation changes made by the CLI's logging setup."""
    logger = logging.getLogger("ray_client")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
