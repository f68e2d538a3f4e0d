# 📄 File: app/shared/core/value_objects.py
# 🧭 Purpose (Layman Explanation):
# Small building blocks that several parts of the app share, like "a picture stored
# somewhere" or "a place on the map".
# 🧪 Purpose (Technical Summary):
# Immutable pydantic value objects reused by the user, group and event domain models.
# 🔗 Dependencies:
# pydantic, enum
# 🔄 Connected Modules / Calls From:
# users/groups/events domain models, storage client, ORM mappers

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ImageProvider(str, Enum):
    """Where an image reference points"""
    SUPABASE = "supabase"
    GOOGLE = "google"


class ImageRef(BaseModel):
    """Reference to an uploaded image (profile photo, group or event banner)."""
    model_config = ConfigDict(frozen=True)

    provider: ImageProvider
    key: Optional[str] = None
    url: str


class Place(BaseModel):
    """A geocoded place attached to a group or an event."""
    model_config = ConfigDict(frozen=True)

    place_id: Optional[str] = Field(None, max_length=255)
    formatted_address: Optional[str] = Field(None, max_length=500)
    name: Optional[str] = Field(None, max_length=255)
    types: List[str] = Field(default_factory=list)
    lat: Optional[float] = Field(None, ge=-90, le=90)
    lng: Optional[float] = Field(None, ge=-180, le=180)
