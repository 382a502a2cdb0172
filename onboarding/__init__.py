"""
Client Onboarding Module
Validates onboarding form input and submits it to the onboarding endpoint.
"""

from .form import onboarding_bp
from .client import OnboardingClient
from .schema import FormInput, ServiceType, decode_form, empty_form, serialize
from .submission import (
    Failure,
    Idle,
    OnboardingSubmitter,
    SubmissionInProgress,
    Submitting,
    Success,
)
from .validation import validate, validate_field

__all__ = [
    'onboarding_bp',
    'OnboardingClient',
    'FormInput',
    'ServiceType',
    'decode_form',
    'empty_form',
    'serialize',
    'Failure',
    'Idle',
    'OnboardingSubmitter',
    'SubmissionInProgress',
    'Submitting',
    'Success',
    'validate',
    'validate_field',
]
