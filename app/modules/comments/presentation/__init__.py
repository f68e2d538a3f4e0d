# 📄 File: app/modules/comments/presentation/__init__.py
# 🧪 Purpose (Technical Summary):
# Presentation layer: comment router and schemas.
