# 📄 File: app/modules/events/domain/__init__.py
# 🧪 Purpose (Technical Summary):
# Domain layer for events: model, repository interface and service.
