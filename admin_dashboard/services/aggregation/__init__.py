# admin_dashboard/services/aggregation/__init__.py
from .normalizer import normalize_waitlist_row
from .grouping import group_waitlist_rows
from .bucketing import bucket_sales
from .assembler import (
    assemble_event_waitlist,
    assemble_grouped_waitlist,
    assemble_sales,
)

__all__ = [
    "normalize_waitlist_row",
    "group_waitlist_rows",
    "bucket_sales",
    "assemble_event_waitlist",
    "assemble_grouped_waitlist",
    "assemble_sales",
]
