# 📄 File: app/modules/care_management/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the use cases of plant care: register a plant, log care, list reminders, check health
# 🧪 Purpose (Technical Summary):
# Application layer (CQRS commands, queries, handlers and DTOs) for care management
# 🔗 Dependencies:
# Domain layer, app.shared
# 🔄 Connected Modules / Calls From:
# Presentation layer, background jobs
