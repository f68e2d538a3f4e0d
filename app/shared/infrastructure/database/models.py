# 📄 File: app/shared/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# One place that lists every table the app stores, so the database can be built in one go.
# 🧪 Purpose (Technical Summary):
# Imports every module's ORM models so they register on the shared declarative Base
# before create_all or alembic autogenerate runs.
# 🔗 Dependencies:
# All module infrastructure/database/models.py files
# 🔄 Connected Modules / Calls From:
# connection.DatabaseConnectionManager.create_all, migrations/env.py

from app.modules.categories.infrastructure.database.models import CategoryModel
from app.modules.comments.infrastructure.database.models import CommentModel
from app.modules.events.infrastructure.database.models import EventAttendeeModel, EventModel
from app.modules.groups.infrastructure.database.models import (
    ActivityLogModel,
    GroupMembershipModel,
    GroupModel,
    GroupTopicModel,
)
from app.modules.user_management.infrastructure.database.models import (
    ModeratorInvitationModel,
    UserModel,
    UserTokenModel,
    user_interests,
)
from app.shared.infrastructure.database.connection import Base

__all__ = [
    "Base",
    "ActivityLogModel",
    "CategoryModel",
    "CommentModel",
    "EventAttendeeModel",
    "EventModel",
    "GroupMembershipModel",
    "GroupModel",
    "GroupTopicModel",
    "ModeratorInvitationModel",
    "UserModel",
    "UserTokenModel",
    "user_interests",
]
