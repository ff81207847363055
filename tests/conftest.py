"""Pytest configuration for test isolation.

Every ``LEDGERCONV_*`` variable is removed for the duration of each test so a
developer's shell or ``.env`` cannot change parser polarity or log levels
underneath the assertions. Tests also run from their own temporary working
directory, because the enhancer looks for ``./auto-enhance-spec.json``.
"""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_env(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    for key in list(os.environ):
        if key.startswith("LEDGERCONV_"):
            monkeypatch.delenv(key, raising=False)
    workdir = tmp_path_factory.mktemp("cwd")
    monkeypatch.chdir(workdir)
