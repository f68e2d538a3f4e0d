# 📄 File: app/modules/user_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where user accounts are actually stored, and how we talk to Google for sign-in.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer: SQLAlchemy persistence and external identity providers.
# 🔗 Dependencies:
# SQLAlchemy, httpx
# 🔄 Connected Modules / Calls From:
# app.main (repository overrides), domain services
