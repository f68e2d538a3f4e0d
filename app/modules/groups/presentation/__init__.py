# 📄 File: app/modules/groups/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing side of clubs.
# 🧪 Purpose (Technical Summary):
# Presentation layer: group routers, schemas and the group path dependency.
# 🔗 Dependencies:
# FastAPI, pydantic
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
