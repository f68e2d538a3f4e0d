# 📄 File: app/modules/user_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the user account endpoints together.
# 🧪 Purpose (Technical Summary):
# API package for user management routers and schemas.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
