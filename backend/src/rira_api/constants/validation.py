"""Centralized validation constants for the Rira API.

Single source of truth for field limits and format patterns used by the
validators and mirrored by the ORM column sizes.
"""

import re
from typing import Final

# =============================================================================
# Format Patterns
# =============================================================================

MOBILE_NUMBER_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\d{11}$")
PERSIAN_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\d{4}/\d{2}/\d{2}$")

# =============================================================================
# Employee Limits
# =============================================================================

EMPLOYEE_NAME_MAX_LENGTH: Final[int] = 60
EMPLOYEE_FIELD_OF_STUDY_MAX_LENGTH: Final[int] = 100
EMPLOYEE_POSITION_MAX_LENGTH: Final[int] = 80
EMPLOYEE_EMAIL_MAX_LENGTH: Final[int] = 150
EMPLOYEE_DESCRIPTION_MAX_LENGTH: Final[int] = 500

# =============================================================================
# Task Limits
# =============================================================================

TASK_TITLE_MAX_LENGTH: Final[int] = 150
TASK_DESCRIPTION_MAX_LENGTH: Final[int] = 500
