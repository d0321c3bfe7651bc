from __future__ import annotations

from fastapi import Request

from .profile import PreferenceProfile


def get_preference_profile(request: Request) -> PreferenceProfile:
    """Preference profile backed by the caller's session."""
    return PreferenceProfile(store=request.session)
