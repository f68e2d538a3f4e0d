# 📄 File: app/modules/comments/domain/__init__.py
# 🧪 Purpose (Technical Summary):
# Domain layer for comments: model, repository interface and service.
