"""
Services package for the profile bot.
"""

from .base import BaseService
from .profile import ProfileService
from .profile_source import ProfileSource

__all__ = ['BaseService', 'ProfileService', 'ProfileSource']
