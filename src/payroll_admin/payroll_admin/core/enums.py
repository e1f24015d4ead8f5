from __future__ import annotations

from enum import Enum

from .exceptions import UnknownCalculationStrategy


class Role(str, Enum):
    """Backend roles. SUPER_ADMIN cannot be assigned from the admin screens."""

    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    USER = "USER"
    YAYASAN = "YAYASAN"


class CalculationStrategy(str, Enum):
    """How a deduction type computes the amount taken from a user's pay.

    Values are the wire tags shared with the backend and must not change.
    """

    FIXED_PER_USER = "FIXED_USER"
    PERCENTAGE_PER_USER = "PERCENTAGE_USER"
    PER_LATE_INSTANCE = "PER_LATE_INSTANCE"
    PER_ABSENCE_DAY = "PER_ALPHA_DAY"
    PERCENTAGE_OF_ABSENCE_DAY = "PERCENTAGE_ALPHA_DAY"
    MANDATORY_PERCENTAGE = "MANDATORY_PERCENTAGE"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")

    @classmethod
    def parse(cls, value) -> "CalculationStrategy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip())
        except ValueError:
            raise UnknownCalculationStrategy(value) from None


class UserLevelField(str, Enum):
    """Which per-user field an assignment must carry."""

    AMOUNT = "amount"
    PERCENTAGE = "percentage"
    NONE = "none"


class LeaveStatus(str, Enum):
    PENDING_APPROVAL = "PENDING_APPROVAL"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


class AttendanceStatus(str, Enum):
    """Attendance statuses as stored by the backend."""

    HADIR = "HADIR"
    IZIN = "IZIN"
    SAKIT = "SAKIT"
    ALPHA = "ALPHA"
    CUTI = "CUTI"
    LIBUR = "LIBUR"
    SELESAI = "SELESAI"
    BELUM = "BELUM"
    TERLAMBAT = "TERLAMBAT"
