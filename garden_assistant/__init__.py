# 📄 File: garden_assistant/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python that the 'garden_assistant' folder holds our gardening assistant code
# and records the basic version and package information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info and package metadata
# for the Garden Assistant FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - Package imports throughout the application

"""
Garden Assistant - AI-Powered Plant Identification and Care Advice

A local backend API that identifies plants from photos, answers follow-up
care questions through a generative model, and keeps watering reminders.
"""

__version__ = "1.0.0"
__title__ = "Garden Assistant API"
__description__ = "Plant identification, care chat and watering reminders"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
