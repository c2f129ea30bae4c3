"""Core enums for type safety across the application."""

from enum import Enum


class RuleType(str, Enum):
    """Eligibility checks, listed in the order they are evaluated."""

    POSITION = "position"
    CUSTOM_RESTRICTION = "custom_restriction"
    STATE_RESTRICTION = "state_restriction"
    SOLE_PROP = "sole_prop"
    INDUSTRY = "industry"
    MINIMUM_REQUIREMENTS = "minimum_requirements"


class Classification(str, Enum):
    """Terminal states of a lender after one screening pass."""

    QUALIFIED = "Qualified"
    NON_QUALIFIED = "Non-Qualified"
    AUTO_DROPPED = "Auto-Dropped"


class DropReason(str, Enum):
    """Why a row was auto-dropped before rule evaluation."""

    BLANK_NAME = "blank_name"
    INVALID_NAME = "invalid_name"
    MISSING_POSITION_BOUNDS = "missing_position_bounds"
    EVALUATION_ERROR = "evaluation_error"
