# 📄 File: app/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules about user accounts, independent of any database or web framework.
# 🧪 Purpose (Technical Summary):
# Domain layer package: entities, repository interfaces and domain services.
# 🔗 Dependencies:
# pydantic, app.shared.core
# 🔄 Connected Modules / Calls From:
# infrastructure and presentation layers of user_management
