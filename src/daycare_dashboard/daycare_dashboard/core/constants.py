"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_DISCREPANCY_RATIO = 0.8
DEFAULT_ATTENDANCE_DISCREPANCY_ERROR_THRESHOLD = 3
DEFAULT_ACTIVITY_MISSING_ERROR_THRESHOLD = 5
DEFAULT_ACTIVITY_MISSING_NAME_LIMIT = 5
DEFAULT_IRC_OVER_CAPACITY_HOURS = 8.0
DEFAULT_IRC_OVER_CAPACITY_ERROR_THRESHOLD = 2
DEFAULT_IRC_RESOURCE_NAME_LIMIT = 3
DEFAULT_IRC_LOW_COMPLETION_RATE = 50
DEFAULT_CROSS_MODULE_NAME_LIMIT = 3
DEFAULT_TOP_ALERTS_LIMIT = 3

NOTE_PREVIEW_LENGTH = 50

# Dashboard routes used as alert deep-links.
ROUTE_DASHBOARD = "/dashboard"
ROUTE_ATTENDANCE = "/daily/attendance"
ROUTE_ACTIVITY = "/daily/activity"
ROUTE_IRC = "/admin/integrated-resource-calendar"
