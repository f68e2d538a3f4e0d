# 📄 File: app/modules/groups/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything about clubs: creating them, joining and leaving, and moderation.
# 🧪 Purpose (Technical Summary):
# Groups bounded context: Group aggregate, membership lifecycle engine and activity log.
# 🔗 Dependencies:
# app.shared, app.modules.user_management
# 🔄 Connected Modules / Calls From:
# app.main, app.api.v1.router, comments, events and search modules

__module_name__ = "groups"
