"""Shared pytest fixtures for the full Nittei test suite."""

from __future__ import annotations

from datetime import date

import pytest

from nittei.dates import DateFormatter

FROZEN_TODAY = date(2024, 7, 1)


@pytest.fixture(autouse=True)
def _freeze_today(monkeypatch: pytest.MonkeyPatch) -> date:
    """Pin the wall-clock date so default current years and banners are stable."""

    monkeypatch.setattr(DateFormatter, "_today", staticmethod(lambda: FROZEN_TODAY))
    return FROZEN_TODAY


@pytest.fixture(autouse=True)
def _clear_base_year_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's `NITTEI_BASE_YEAR` from leaking into tests."""

    monkeypatch.delenv("NITTEI_BASE_YEAR", raising=False)
