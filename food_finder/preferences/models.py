from __future__ import annotations

from pydantic import BaseModel, Field


class PreferencesRequest(BaseModel):
    selections: list[str] = Field(
        default_factory=list,
        description='Preset names and/or category tags, e.g. ["Ahimsa", "Nuts"]',
    )


class PreferencesResponse(BaseModel):
    selections: list[str]
    ignored_categories: list[str]


class PreferenceOptions(BaseModel):
    presets: dict[str, list[str]]
    preset_names: list[str]
    categories: list[str]
