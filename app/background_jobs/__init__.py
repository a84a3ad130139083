# 📄 File: app/background_jobs/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the chores the app does on its own in the background, like checking which plants need water today
# 🧪 Purpose (Technical Summary):
# Package initialization for Celery background tasks
# 🔗 Dependencies:
# celery, celery_config.py
# 🔄 Connected Modules / Calls From:
# Celery workers and beat scheduler
