from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from profilebot.utils.bindable import Bindable
from profilebot.utils.exceptions import UserNotFoundError
from profilebot.views.header import ProfileHeaderView, TopHeader
from tests.conftest import SITE_ROOT


class FakeSource:
    """Stands in for ProfileSource: refresh() assigns a queued profile."""

    def __init__(self, next_profile=None, error=None):
        self.current = Bindable()
        self.next_profile = next_profile
        self.error = error

    async def refresh(self):
        if self.error:
            self.current.value = None
            raise self.error
        self.current.value = self.next_profile
        return self.next_profile


def make_interaction():
    interaction = MagicMock()
    interaction.response.defer = AsyncMock()
    interaction.followup.send = AsyncMock()
    interaction.followup.edit_message = AsyncMock()
    interaction.message.id = 1234
    return interaction


@pytest.mark.anyio
async def test_link_button_follows_header_user(header_config, full_profile):
    header = TopHeader(header_config)
    view = ProfileHeaderView(header, FakeSource())

    assert view.link_button.style == discord.ButtonStyle.link
    assert view.link_button.url == f"{SITE_ROOT}/users/0"

    header.set_user(full_profile)
    assert view.link_button.url == f"{SITE_ROOT}/users/2"


@pytest.mark.anyio
async def test_refresh_reprojects_and_edits_message(header_config, full_profile, other_profile):
    source = FakeSource(next_profile=other_profile)
    header = TopHeader(header_config)
    header.user.bind_to(source.current)
    source.current.value = full_profile
    view = ProfileHeaderView(header, source)
    interaction = make_interaction()

    await view._refresh_callback(interaction)

    interaction.followup.edit_message.assert_awaited_once()
    embed = interaction.followup.edit_message.call_args.kwargs["embed"]
    assert embed.title == "Cookiezi"
    assert view.link_button.url == f"{SITE_ROOT}/users/124493"


@pytest.mark.anyio
async def test_refresh_of_deleted_user_shows_empty_header(header_config, full_profile):
    source = FakeSource(error=UserNotFoundError(2))
    header = TopHeader(header_config)
    header.user.bind_to(source.current)
    source.current.value = full_profile
    view = ProfileHeaderView(header, source)
    interaction = make_interaction()

    await view._refresh_callback(interaction)

    interaction.followup.send.assert_awaited_once()
    embed = interaction.followup.edit_message.call_args.kwargs["embed"]
    assert embed.title == "Unknown user"
    assert embed.fields == []


@pytest.mark.anyio
async def test_timeout_closes_header(header_config, full_profile):
    source = FakeSource()
    header = TopHeader(header_config)
    header.user.bind_to(source.current)
    view = ProfileHeaderView(header, source)

    await view.on_timeout()
    source.current.value = full_profile

    assert header.snapshot().username == ""
