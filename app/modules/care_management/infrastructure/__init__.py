# 📄 File: app/modules/care_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes where plant care data is kept
# 🧪 Purpose (Technical Summary):
# Infrastructure layer with repository implementations for care management
# 🔗 Dependencies:
# Domain repository interfaces
# 🔄 Connected Modules / Calls From:
# Presentation dependencies, background jobs, tests
