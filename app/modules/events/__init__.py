# 📄 File: app/modules/events/__init__.py
# 🧭 Purpose (Layman Explanation):
# Meetups organised by clubs and the people signed up for them.
# 🧪 Purpose (Technical Summary):
# Events bounded context: group-owned events with bounded attendance.
# 🔗 Dependencies:
# app.shared, app.modules.groups, app.modules.user_management
# 🔄 Connected Modules / Calls From:
# app.main, app.api.v1.router

__module_name__ = "events"
