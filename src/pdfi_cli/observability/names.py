# src/pdfi_cli/observability/names.py

"""Standard metric names for pdfi observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Command Metrics
# ============================================================================

# Duration
COMMAND_DURATION = "pdfi_command_duration"

# Counters
COMMANDS_TOTAL = "pdfi_commands_total"
COMMAND_ERRORS_TOTAL = "pdfi_command_errors_total"


# ============================================================================
# Object Metrics
# ============================================================================

# Counters
OBJECTS_RENDERED_TOTAL = "pdfi_objects_rendered_total"
OBJECTS_MISSING_TOTAL = "pdfi_objects_missing_total"

# Counters (bytes written raw, after stream decoding)
OBJECTS_DECODED_BYTES = "pdfi_objects_decoded_bytes"
