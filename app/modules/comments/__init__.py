# 📄 File: app/modules/comments/__init__.py
# 🧭 Purpose (Layman Explanation):
# Conversations on club pages: comments and replies.
# 🧪 Purpose (Technical Summary):
# Comments bounded context: threaded comments with a tagged target.
# 🔗 Dependencies:
# app.shared, app.modules.groups, app.modules.user_management
# 🔄 Connected Modules / Calls From:
# app.main, app.api.v1.router

__module_name__ = "comments"
