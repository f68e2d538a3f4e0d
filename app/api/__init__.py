# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The front door of the Clubbera API: request middleware, health checks and the list
# of every web address the app answers.
# 🧪 Purpose (Technical Summary):
# API layer package: middleware, v1 router aggregation and health endpoints.
# 🔄 Connected Modules / Calls From:
# app.main

API_PREFIX = "/api"
CURRENT_VERSION = "v1"
