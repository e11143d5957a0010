"""
Creative Coach
Application package initialization
"""

from creative_coach.config import settings, get_settings, Settings

__all__ = ["settings", "get_settings", "Settings"]
