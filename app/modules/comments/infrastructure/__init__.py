# 📄 File: app/modules/comments/infrastructure/__init__.py
# 🧪 Purpose (Technical Summary):
# Infrastructure layer for comments (SQLAlchemy persistence).
