# 📄 File: app/modules/events/presentation/__init__.py
# 🧪 Purpose (Technical Summary):
# Presentation layer: event router and schemas.
