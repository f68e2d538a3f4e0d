# 📄 File: app/modules/categories/domain/__init__.py
# 🧪 Purpose (Technical Summary):
# Domain layer for categories.
