# 📄 File: app/modules/categories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The list of interests people can pick and clubs can be filed under.
# 🔄 Connected Modules / Calls From:
# app.main, app.api.v1.router, user interests

__module_name__ = "categories"
