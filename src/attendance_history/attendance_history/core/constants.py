"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ADMIN_RECORD_LIMIT = 500
EMPLOYEE_SELECTOR_ALL = "all"

REPORT_FILENAME_PREFIX = "attendance_report"
REPORT_MIMETYPE = "text/csv"
REPORT_DELIMITER = ","
REPORT_LINE_TERMINATOR = "\n"
REPORT_ENCODING = "utf-8-sig"

# Report dates must not depend on the process locale.
MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
