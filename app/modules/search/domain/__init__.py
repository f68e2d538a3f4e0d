# 📄 File: app/modules/search/domain/__init__.py
# 🧪 Purpose (Technical Summary):
# Domain layer for group search: query models, repository interface and service.
