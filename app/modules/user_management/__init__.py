# 📄 File: app/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything about people's accounts: signing up, logging in, and their profiles.
# 🧪 Purpose (Technical Summary):
# User management bounded context (domain, infrastructure, presentation layers).
# 🔗 Dependencies:
# app.shared
# 🔄 Connected Modules / Calls From:
# app.main, app.api.v1.router, the groups/comments/events modules (auth gate)

"""
User Management Module

- Domain: User entity, UserRepository interface, auth and profile services
- Infrastructure: SQLAlchemy models and repository, Google OAuth
- Presentation: auth and user endpoints, the auth gate dependencies
"""

__module_name__ = "user_management"
