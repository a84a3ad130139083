# 📄 File: app/modules/care_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the data formats of the plant care API
# 🧪 Purpose (Technical Summary):
# Package initialization for care management request/response schemas
# 🔗 Dependencies:
# care_schemas.py
# 🔄 Connected Modules / Calls From:
# Care endpoints
