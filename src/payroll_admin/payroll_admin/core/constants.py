"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

from .enums import AttendanceStatus, Role

PERCENTAGE_MIN = Decimal("0")
PERCENTAGE_MAX = Decimal("100")

MIN_PASSWORD_LENGTH = 6
DEFAULT_PAGE_LIMIT = 10
USER_LOOKUP_LIMIT = 1000
DEFAULT_API_TIMEOUT = 15

ASSIGNABLE_ROLES = (Role.ADMIN, Role.USER, Role.YAYASAN)

ADMIN_SETTABLE_STATUSES = (
    AttendanceStatus.IZIN,
    AttendanceStatus.SAKIT,
    AttendanceStatus.CUTI,
    AttendanceStatus.ALPHA,
    AttendanceStatus.LIBUR,
)
