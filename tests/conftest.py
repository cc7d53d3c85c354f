"""Shared test fixtures and utilities."""

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("DISCORD_TOKEN", "test-token")
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_profiles.db")
os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "profilebot-test-logs"))

from profilebot.config import HeaderConfig
from profilebot.data_models.profile import Country, UserProfile, UserStatistics


SITE_ROOT = "https://example.test"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def header_config():
    return HeaderConfig(
        website_root_url=SITE_ROOT,
        avatar_root_url="https://avatars.example.test",
        avatar_placeholder_url="https://example.test/avatar-guest.png",
    )


def make_statistics(**overrides) -> UserStatistics:
    values = dict(
        ranked_score=4_567_890_123,
        display_accuracy="98.76%",
        play_count=1_234_567,
        total_score=12_345_678_901,
        total_hits=9_876_543,
        max_combo=2_345,
        replays_watched=12,
    )
    values.update(overrides)
    return UserStatistics(**values)


def make_profile(**overrides) -> UserProfile:
    values = dict(
        id=2,
        username="peppy",
        profile_slug="peppy",
        title="osu! founder",
        colour="#ff66aa",
        country=Country(code="AU", full_name="Australia"),
        avatar_url=None,
        support_level=3,
        statistics=make_statistics(),
    )
    values.update(overrides)
    return UserProfile(**values)


@pytest.fixture
def full_profile() -> UserProfile:
    return make_profile()


@pytest.fixture
def other_profile() -> UserProfile:
    return make_profile(
        id=124493,
        username="Cookiezi",
        profile_slug=None,
        title=None,
        colour=None,
        country=Country(code="KR", full_name="South Korea"),
        avatar_url="https://cdn.example.test/avatars/124493.png",
        support_level=0,
        statistics=make_statistics(
            ranked_score=10,
            display_accuracy="99.01%",
            play_count=0,
            total_score=20,
            total_hits=30,
            max_combo=40,
            replays_watched=0,
        ),
    )
