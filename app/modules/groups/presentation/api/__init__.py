# 📄 File: app/modules/groups/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the club endpoints together.
# 🧪 Purpose (Technical Summary):
# API package for group routers and schemas.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
