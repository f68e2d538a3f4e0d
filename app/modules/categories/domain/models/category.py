# 📄 File: app/modules/categories/domain/models/category.py
# 🧭 Purpose (Layman Explanation):
# A category is a kind of interest (like "Hiking" or "Board games") people can pick.
# 🧪 Purpose (Technical Summary):
# Category domain model; names are unique case-insensitively.

import uuid

from pydantic import BaseModel, Field

NAME_MAX_LENGTH = 60


class Category(BaseModel):
    category_id: uuid.UUID = Field(default_factory=uuid.uuid4)
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    creator_id: uuid.UUID
