"""
Current-profile source.

Owns the "currently selected profile" bindable that headers bind to. Loading
happens here; once a profile has loaded it is assigned in one step, so bound
headers only ever see complete profiles or None.
"""

import logging
from typing import Optional

from profilebot.data_models.profile import UserProfile
from profilebot.services.profile import ProfileService
from profilebot.utils.bindable import Bindable
from profilebot.utils.exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class ProfileSource:
    """Holds the selected user profile and loads replacements on request."""

    def __init__(self, profile_service: ProfileService):
        self.profile_service = profile_service
        self.current: Bindable[UserProfile] = Bindable()
        self.selected_user_id: Optional[int] = None

    async def select(self, user_id: int) -> UserProfile:
        """
        Load a user's profile and make it current.

        Raises:
            UserNotFoundError: After clearing the current profile
        """
        self.selected_user_id = user_id
        try:
            profile = await self.profile_service.get_profile(user_id)
        except UserNotFoundError:
            if self.selected_user_id == user_id:
                self.current.value = None
            raise

        # A later select() may have superseded this one while loading
        if self.selected_user_id == user_id:
            self.current.value = profile
        return profile

    async def refresh(self) -> Optional[UserProfile]:
        """Reload the selected user bypassing the cache. Does nothing when none is selected."""
        if self.selected_user_id is None:
            return None
        self.profile_service.invalidate(self.selected_user_id)
        return await self.select(self.selected_user_id)

    def clear(self):
        self.selected_user_id = None
        self.current.value = None
