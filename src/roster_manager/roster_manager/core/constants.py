"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import IncidentType

UNASSIGNED_SUPERVISOR = "Unassigned"
DEFAULT_JOB_TITLE = "Agent"
DEFAULT_LOG_AUTHOR = "Sup"

MAX_SCORE = 100
RELIABILITY_DELTAS = {
    IncidentType.ABSENCE: -15,
    IncidentType.LATENESS: -5,
    IncidentType.CONDUCT: -20,
    IncidentType.COMMENDATION: 5,
    IncidentType.OTHER: 0,
}
RISK_SCORE_THRESHOLD = 90

# name, legal id, email, job title, supervisor, entry date, shift, day off
PROFILE_WEIGHTS = {
    "full_name": 10,
    "legal_id": 10,
    "email": 15,
    "job_title": 15,
    "supervisor": 15,
    "entry_date": 10,
    "shift": 10,
    "day_off": 15,
}

PATTERN_MIN_EMPLOYEE_ABSENCES = 3
PATTERN_MIN_WEEKDAY_ABSENCES = 5
PATTERN_MAX_FLAGS = 3

STAFFING_TOLERANCE = 2

ASSISTANT_CONTEXT_LIMIT = 20
