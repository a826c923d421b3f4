"""Constants for the filter engine wire format."""


# =============================================================================
# Boolean Toggle Literals
# =============================================================================

# Form values sent by boolean filter checkboxes
BOOLEAN_ON = "true"
BOOLEAN_OFF = "false"


# =============================================================================
# Wire Keys
# =============================================================================

RANGE_MIN = "min"
RANGE_MAX = "max"
SELECT_ID = "id"
MULTI_SELECTED = "selected"

# Prefix marking the compact single-select form, e.g. ["[42]"]
BRACKET_PREFIX = "["
