# 📄 File: app/modules/search/__init__.py
# 🧭 Purpose (Layman Explanation):
# Finding clubs by what they are about and where they meet.
# 🔄 Connected Modules / Calls From:
# app.main, app.api.v1.router

__module_name__ = "search"
