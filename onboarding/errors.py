"""
Field-level error codes for the onboarding form
"""

from enum import Enum
from typing import NamedTuple


class ErrorCode(str, Enum):
    TOO_SHORT = 'TooShort'
    TOO_LONG = 'TooLong'
    INVALID_CHARACTERS = 'InvalidCharacters'
    INVALID_FORMAT = 'InvalidFormat'
    EMPTY_SELECTION = 'EmptySelection'
    OUT_OF_RANGE = 'OutOfRange'
    INVALID_DATE = 'InvalidDate'
    PAST_DATE = 'PastDate'
    NOT_ACCEPTED = 'NotAccepted'

    # Decode stage, raised before any rule runs
    INVALID_ENUM = 'InvalidEnum'
    INVALID_TYPE = 'InvalidType'


class FieldError(NamedTuple):
    code: ErrorCode
    message: str
