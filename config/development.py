import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Engine thresholds (see daycare_dashboard.core.settings.EngineSettings)
DISCREPANCY_RATIO = float(os.getenv("DISCREPANCY_RATIO", "0.8"))
ATTENDANCE_DISCREPANCY_ERROR_THRESHOLD = int(os.getenv("ATTENDANCE_DISCREPANCY_ERROR_THRESHOLD", "3"))
ACTIVITY_MISSING_ERROR_THRESHOLD = int(os.getenv("ACTIVITY_MISSING_ERROR_THRESHOLD", "5"))
ACTIVITY_MISSING_NAME_LIMIT = int(os.getenv("ACTIVITY_MISSING_NAME_LIMIT", "5"))
IRC_OVER_CAPACITY_HOURS = float(os.getenv("IRC_OVER_CAPACITY_HOURS", "8"))
IRC_OVER_CAPACITY_ERROR_THRESHOLD = int(os.getenv("IRC_OVER_CAPACITY_ERROR_THRESHOLD", "2"))
IRC_RESOURCE_NAME_LIMIT = int(os.getenv("IRC_RESOURCE_NAME_LIMIT", "3"))
IRC_LOW_COMPLETION_RATE = int(os.getenv("IRC_LOW_COMPLETION_RATE", "50"))
CROSS_MODULE_NAME_LIMIT = int(os.getenv("CROSS_MODULE_NAME_LIMIT", "3"))
TOP_ALERTS_LIMIT = int(os.getenv("TOP_ALERTS_LIMIT", "3"))
