# 📄 File: app/modules/user_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing side of user accounts: endpoints and the sign-in checkpoint.
# 🧪 Purpose (Technical Summary):
# Presentation layer: FastAPI routers, schemas and auth gate dependencies.
# 🔗 Dependencies:
# FastAPI, pydantic
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
