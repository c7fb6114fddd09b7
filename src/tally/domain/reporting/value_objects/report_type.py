"""Report type value object."""

from enum import Enum


class ReportType(str, Enum):
    """Kind of report page a chart is rendered on.

    Only distinguishes cached results; the figures themselves do not depend on it.
    """

    DEFAULT = "default"
    AUDIT = "audit"
    BUDGET = "budget"
    CATEGORY = "category"
    TAG = "tag"
