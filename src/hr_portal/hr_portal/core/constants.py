"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINIMUM_EMPLOYEE_AGE = 18
MINIMUM_SALARY = 20000
MAXIMUM_SALARY = 150000

EMPLOYEES_PER_PAGE = 5

DEFAULT_UPLOAD_URL_PREFIX = "/uploads"
