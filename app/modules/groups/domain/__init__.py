# 📄 File: app/modules/groups/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules about clubs and membership, independent of the database and the web.
# 🧪 Purpose (Technical Summary):
# Domain layer package for groups: models, repository interfaces and services.
# 🔗 Dependencies:
# pydantic, app.shared.core
# 🔄 Connected Modules / Calls From:
# groups infrastructure and presentation layers
