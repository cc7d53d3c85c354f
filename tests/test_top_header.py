import logging

import pytest

from profilebot.config import HeaderConfig
from profilebot.data_models.header import StatsLine
from profilebot.data_models.profile import Country
from profilebot.utils.bindable import Bindable
from profilebot.views.header import TopHeader
from tests.conftest import SITE_ROOT, make_profile, make_statistics


EXPECTED_CAPTIONS = [
    "Ranked Score",
    "Hit Accuracy",
    "Play Count",
    "Total Score",
    "Total Hits",
    "Maximum Combo",
    "Replays Watched by Others",
]


@pytest.fixture
def header(header_config):
    with TopHeader(header_config) as header:
        yield header


def test_new_header_shows_empty_state(header):
    snapshot = header.snapshot()

    assert snapshot.username == ""
    assert snapshot.title == ""
    assert snapshot.country_text == "Alien"
    assert snapshot.flag is None
    assert snapshot.support_level == 0
    assert snapshot.profile_link == f"{SITE_ROOT}/users/0"
    assert snapshot.stats == ()
    assert snapshot.avatar_is_placeholder is True
    assert snapshot.avatar_url == "https://example.test/avatar-guest.png"
    assert snapshot.title_colour == 0xffffff


def test_statistics_render_seven_lines_in_order(header, full_profile):
    header.set_user(full_profile)

    stats = header.snapshot().stats
    assert [line.label for line in stats] == EXPECTED_CAPTIONS
    assert stats == (
        StatsLine("Ranked Score", "4,567,890,123"),
        StatsLine("Hit Accuracy", "98.76%"),
        StatsLine("Play Count", "1,234,567"),
        StatsLine("Total Score", "12,345,678,901"),
        StatsLine("Total Hits", "9,876,543"),
        StatsLine("Maximum Combo", "2,345"),
        StatsLine("Replays Watched by Others", "12"),
    )


def test_zero_counts_render_as_zero(header):
    header.set_user(make_profile(statistics=make_statistics(play_count=0)))

    values = {line.label: line.value for line in header.snapshot().stats}
    assert values["Play Count"] == "0"


def test_accuracy_is_passed_through_verbatim(header):
    header.set_user(make_profile(statistics=make_statistics(display_accuracy="97,5 %")))

    values = {line.label: line.value for line in header.snapshot().stats}
    assert values["Hit Accuracy"] == "97,5 %"


def test_full_profile_projects_every_slot(header, full_profile):
    header.set_user(full_profile)
    snapshot = header.snapshot()

    assert snapshot.username == "peppy"
    assert snapshot.profile_link == f"{SITE_ROOT}/users/2"
    assert snapshot.flag == "🇦🇺"
    assert snapshot.country_code == "AU"
    assert snapshot.country_text == "Australia"
    assert snapshot.support_level == 3
    assert snapshot.title == "osu! founder"
    assert snapshot.title_colour == 0xff66aa
    assert snapshot.avatar_url == "https://avatars.example.test/2"
    assert snapshot.avatar_is_placeholder is False


def test_clearing_user_resets_every_slot(header, full_profile):
    header.set_user(full_profile)
    header.set_user(None)

    assert header.snapshot() == TopHeader(header.config).snapshot()
    assert len(header.user_stats) == 0
    assert header.snapshot().profile_link.endswith("/users/0")


def test_missing_country_shows_alien_without_flag(header):
    header.set_user(make_profile(country=None))
    snapshot = header.snapshot()

    assert snapshot.country_text == "Alien"
    assert snapshot.flag is None
    assert snapshot.country_code is None


def test_missing_statistics_keeps_other_slots(header):
    header.set_user(make_profile(statistics=None))
    snapshot = header.snapshot()

    assert snapshot.stats == ()
    assert snapshot.username == "peppy"
    assert snapshot.country_text == "Australia"
    assert snapshot.support_level == 3
    assert snapshot.title == "osu! founder"
    assert snapshot.profile_link == f"{SITE_ROOT}/users/2"


def test_switching_users_leaves_no_stale_state(header_config, header, full_profile):
    sparse = make_profile(
        id=7,
        username="sparse",
        title=None,
        colour=None,
        country=None,
        support_level=0,
        statistics=None,
    )

    header.set_user(full_profile)
    header.set_user(sparse)

    fresh = TopHeader(header_config)
    fresh.set_user(sparse)
    assert header.snapshot() == fresh.snapshot()


def test_switching_between_full_profiles(header, full_profile, other_profile):
    header.set_user(full_profile)
    header.set_user(other_profile)
    snapshot = header.snapshot()

    assert snapshot.username == "Cookiezi"
    assert snapshot.title == ""
    assert snapshot.title_colour == 0xffffff
    assert snapshot.country_text == "South Korea"
    assert snapshot.support_level == 0
    assert snapshot.avatar_url == "https://cdn.example.test/avatars/124493.png"
    assert [line.value for line in snapshot.stats] == ["10", "99.01%", "0", "20", "30", "40", "0"]


def test_setting_same_user_twice_is_idempotent(header_config, full_profile):
    once = TopHeader(header_config)
    once.set_user(full_profile)

    twice = TopHeader(header_config)
    twice.set_user(full_profile)
    twice.set_user(full_profile)

    assert once.snapshot() == twice.snapshot()


def test_invalid_title_colour_falls_back_to_white(header, caplog):
    with caplog.at_level(logging.WARNING, logger="profilebot.views.header"):
        header.set_user(make_profile(colour="not-a-colour"))

    assert header.snapshot().title_colour == 0xffffff
    assert "not-a-colour" in caplog.text


def test_empty_username_projects_empty_string(header):
    header.set_user(make_profile(username=None, title=""))

    assert header.snapshot().username == ""
    assert header.snapshot().title == ""


def test_country_without_name_shows_alien_but_keeps_flag(header):
    header.set_user(make_profile(country=Country(code="NZ", full_name="")))
    snapshot = header.snapshot()

    assert snapshot.country_text == "Alien"
    assert snapshot.flag == "🇳🇿"


def test_captions_follow_configured_locale(header_config, full_profile):
    from dataclasses import replace

    header = TopHeader(replace(header_config, locale="de"))
    header.set_user(full_profile)

    assert header.snapshot().stats[0].label == "Ranglistenpunkte"


def test_header_follows_bound_external_value(header, full_profile, other_profile):
    current = Bindable()
    header.user.bind_to(current)

    current.value = full_profile
    assert header.snapshot().username == "peppy"

    current.value = other_profile
    assert header.snapshot().username == "Cookiezi"

    current.value = None
    assert header.snapshot().username == ""


def test_closed_header_stops_following(header_config, full_profile):
    current = Bindable()
    header = TopHeader(header_config)
    header.user.bind_to(current)
    header.close()

    current.value = full_profile

    assert header.snapshot().username == ""
    assert header.user.value is None


def test_to_embed_renders_snapshot(header, full_profile):
    header.set_user(full_profile)
    embed = header.to_embed()

    assert embed.title == "peppy"
    assert embed.url == f"{SITE_ROOT}/users/2"
    assert len(embed.fields) == 7


def test_profile_link_with_trailing_slash_root():
    with TopHeader(HeaderConfig(website_root_url="https://osu.ppy.sh/")) as header:
        header.set_user(make_profile(id=5))

        assert header.snapshot().profile_link == "https://osu.ppy.sh/users/5"
