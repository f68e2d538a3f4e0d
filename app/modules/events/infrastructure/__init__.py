# 📄 File: app/modules/events/infrastructure/__init__.py
# 🧪 Purpose (Technical Summary):
# Infrastructure layer for events (SQLAlchemy persistence).
