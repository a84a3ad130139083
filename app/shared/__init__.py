# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common utilities and tools
# that all parts of our Plant Care app can use, like settings, logging and error types.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, exceptions, events,
# logging and clock utilities used throughout the Plant Care application modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

__all__ = []
