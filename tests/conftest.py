"""Shared pytest fixtures and configuration for the argcursor test suite.

Guidelines
----------
* Diagnostics are captured through an injected ``StringIO`` sink, never
  by reading the real stderr, unless a test targets the default sink.
* Core tests must be pure: no files, no network, no OS state.
"""

from __future__ import annotations

import io

import pytest


@pytest.fixture
def log_sink() -> io.StringIO:
    """Fresh in-memory diagnostic sink."""
    return io.StringIO()
