from __future__ import annotations

from enum import Enum


class WorkStatus(str, Enum):
    """Employment lifecycle status."""

    ACTIVE = "Active"
    EXIT = "Exit"
    AREA_CHANGE = "AreaChange"
    LEAVE = "Leave"


class ShiftType(str, Enum):
    AM = "AM"
    PM = "PM"
    INTERMEDIATE = "Intermediate"


class DayOff(str, Enum):
    """Weekday names; declaration order is the fixed iteration order for day-off buckets."""

    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"


class AttendanceMark(str, Enum):
    """Daily attendance status recorded per employee and ISO date."""

    PRESENT = "Present"
    LATE = "Late"
    ABSENT = "Absent"
    MEDICAL = "Medical"
    EXCUSED_NO_RECORD = "ExcusedNoRecord"
    DAY_OFF = "DayOff"


class IncidentType(str, Enum):
    ABSENCE = "Absence"
    LATENESS = "Lateness"
    CONDUCT = "Conduct"
    COMMENDATION = "Commendation"
    OTHER = "Other"


class Severity(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class CoachingTopic(str, Enum):
    PERFORMANCE = "Performance"
    ATTENDANCE = "Attendance"
    ATTITUDE = "Attitude"
    ONE_ON_ONE = "OneOnOne"
    IMPROVEMENT_PLAN = "ImprovementPlan"


class CoachingStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
