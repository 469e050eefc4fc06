# src/versions_kit/observability/names.py

"""Standard metric names for versions-kit observability.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Tool-versions file metrics
# ============================================================================

# Duration
TOOL_VERSIONS_PARSE_DURATION = "tool_versions_parse_duration"
TOOL_VERSIONS_SAVE_DURATION = "tool_versions_save_duration"

# Gauges
TOOL_VERSIONS_ENTRIES = "tool_versions_entries"

# Counters
TOOL_VERSIONS_IO_ERRORS_TOTAL = "tool_versions_io_errors_total"
