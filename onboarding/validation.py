"""
Form Validation for Client Onboarding
"""

import re
from datetime import date, datetime
from typing import Callable, Dict, List, Optional, Tuple

from .errors import ErrorCode, FieldError
from .schema import FormInput

NAME_PATTERN = re.compile(r"[a-zA-Z\s'-]+")
EMAIL_PATTERN = re.compile(r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}')

BUDGET_MIN = 100
BUDGET_MAX = 1_000_000

Rule = Callable[[object, date], Optional[FieldError]]


def min_length(limit: int) -> Rule:
    def rule(value, today):
        if len(value) < limit:
            return FieldError(ErrorCode.TOO_SHORT, f'must be at least {limit} characters')
        return None
    return rule


def max_length(limit: int) -> Rule:
    def rule(value, today):
        if len(value) > limit:
            return FieldError(ErrorCode.TOO_LONG, f'must be under {limit} characters')
        return None
    return rule


def matches(pattern, code: ErrorCode, message: str) -> Rule:
    def rule(value, today):
        if not pattern.fullmatch(value):
            return FieldError(code, message)
        return None
    return rule


def not_empty(value, today) -> Optional[FieldError]:
    if not value:
        return FieldError(ErrorCode.EMPTY_SELECTION, 'Select at least one service')
    return None


def in_range(value, today) -> Optional[FieldError]:
    if value is None:
        return None
    if not BUDGET_MIN <= value <= BUDGET_MAX:
        return FieldError(ErrorCode.OUT_OF_RANGE, f'must be between {BUDGET_MIN} and {BUDGET_MAX}')
    return None


def parse_date(value: str) -> Optional[date]:
    """Parse a calendar date, dropping any time-of-day component"""
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        pass
    try:
        return datetime.fromisoformat(value).date()
    except (TypeError, ValueError):
        return None


def today_or_later(value, today) -> Optional[FieldError]:
    start = parse_date(value)
    if start is None:
        return FieldError(ErrorCode.INVALID_DATE, 'must be a valid date')
    if start < today:
        return FieldError(ErrorCode.PAST_DATE, 'must be today or later')
    return None


def accepted(value, today) -> Optional[FieldError]:
    if value is not True:
        return FieldError(ErrorCode.NOT_ACCEPTED, 'must accept the terms')
    return None


# Wire name -> (FormInput attribute, rules checked in order)
RULES: Dict[str, Tuple[str, List[Rule]]] = {
    'fullName': ('full_name', [
        min_length(2),
        max_length(80),
        matches(NAME_PATTERN, ErrorCode.INVALID_CHARACTERS,
                'may only contain letters, spaces, apostrophes and hyphens'),
    ]),
    'email': ('email', [
        matches(EMAIL_PATTERN, ErrorCode.INVALID_FORMAT, 'Invalid email address'),
    ]),
    'companyName': ('company_name', [
        min_length(2),
        max_length(100),
    ]),
    'services': ('services', [not_empty]),
    'budget': ('budget', [in_range]),
    'startDate': ('start_date', [today_or_later]),
    'terms': ('terms', [accepted]),
}


def check_field(form: FormInput, field: str, today: date = None) -> Optional[FieldError]:
    """Run one field's rules, stopping at the first failure"""
    today = today or date.today()
    attribute, rules = RULES[field]
    value = getattr(form, attribute)

    for rule in rules:
        error = rule(value, today)
        if error is not None:
            return error
    return None


def check_form(form: FormInput, today: date = None) -> Dict[str, FieldError]:
    """
    Run every field's rules

    Args:
        form: Decoded form input
        today: Reference date; defaults to the local current date

    Returns:
        Mapping of wire name to FieldError for each failing field
    """
    today = today or date.today()
    errors = {}

    for field in RULES:
        error = check_field(form, field, today)
        if error is not None:
            errors[field] = error

    return errors


def validate(form: FormInput, today: date = None) -> Dict[str, str]:
    """
    Validate onboarding form input

    Args:
        form: Decoded form input
        today: Reference date; defaults to the local current date

    Returns:
        Mapping of field name to error message; empty when the input is acceptable
    """
    return {field: error.message for field, error in check_form(form, today).items()}


def validate_field(form: FormInput, field: str, today: date = None) -> Optional[str]:
    """Validate a single field, e.g. while the user is typing"""
    if field not in RULES:
        raise KeyError(f'Unknown form field: {field}')
    error = check_field(form, field, today)
    return error.message if error else None
