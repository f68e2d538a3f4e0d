# 📄 File: app/modules/groups/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where clubs, memberships and the activity diary are actually stored.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer for groups (SQLAlchemy persistence).
# 🔗 Dependencies:
# SQLAlchemy
# 🔄 Connected Modules / Calls From:
# app.main (repository overrides)
