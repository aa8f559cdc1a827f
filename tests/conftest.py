"""Shared fixtures for urlformat tests."""

from __future__ import annotations

import pytest

from urlformat.testing import CallRecorder


@pytest.fixture
def recorder() -> CallRecorder:
    """A fresh recording callback."""
    return CallRecorder()
