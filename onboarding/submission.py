"""
Onboarding Submission Controller
Gates submission on validation, sends the payload and tracks the result state.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, Mapping, Optional, Union

import requests

from .client import OnboardingClient
from .errors import FieldError
from .schema import FormInput, decode_form, empty_form, field_alias, serialize
from .validation import check_form

logger = logging.getLogger(__name__)

GENERIC_SUBMIT_ERROR = 'Submit failed'
GENERIC_SERVER_ERROR = 'Server error'


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Submitting:
    pass


@dataclass(frozen=True)
class Success:
    payload: FormInput


@dataclass(frozen=True)
class Failure:
    message: str


SubmissionOutcome = Union[Success, Failure]
SubmissionState = Union[Idle, Submitting, Success, Failure]


class SubmissionInProgress(Exception):
    """Raised when submit is called while a submission is in flight"""


class OnboardingSubmitter:
    """
    Owns the form input, its field errors and the submission state.

    State moves Idle -> Submitting -> Success | Failure. A new submit from
    Success or Failure goes back through Submitting.
    """

    def __init__(self, client: OnboardingClient, form: FormInput = None,
                 today: Callable[[], date] = date.today):
        self.client = client
        self.form = form if form is not None else empty_form()
        self.errors: Dict[str, str] = {}
        self.state: SubmissionState = Idle()
        self._today = today
        self._decode_errors: Dict[str, FieldError] = {}

    @property
    def busy(self) -> bool:
        return isinstance(self.state, Submitting)

    def load(self, raw: Mapping) -> FormInput:
        """Replace the form input with decoded raw input"""
        self.form, self._decode_errors = decode_form(raw)
        return self.form

    def update(self, **fields) -> FormInput:
        """Replace individual fields, keyed by FormInput attribute name"""
        self.form = FormInput.model_validate({**self.form.model_dump(), **fields})
        for attribute in fields:
            self._decode_errors.pop(field_alias(attribute), None)
        return self.form

    def reset(self) -> None:
        self.form = empty_form()
        self.errors = {}
        self._decode_errors = {}

    def validate(self) -> Dict[str, str]:
        errors = check_form(self.form, today=self._today())
        errors.update(self._decode_errors)
        self.errors = {field: error.message for field, error in errors.items()}
        return self.errors

    def submit(self, form: FormInput = None) -> Optional[SubmissionOutcome]:
        """
        Validate and send the form

        Args:
            form: Input to submit; defaults to the current form input

        Returns:
            Success or Failure, or None when field errors blocked the
            submission (see self.errors)

        Raises:
            SubmissionInProgress: if a submission is already in flight
        """
        if self.busy:
            raise SubmissionInProgress("A submission is already in progress")

        if form is not None:
            self.form = form
            self._decode_errors = {}

        if self.validate():
            logger.info(f"Submission blocked by field errors: {', '.join(sorted(self.errors))}")
            return None

        form = self.form
        self.state = Submitting()
        payload = serialize(form)

        logger.info(f"Dispatching onboarding submission to {self.client.endpoint}")

        try:
            response = self.client.send(payload)
        except requests.exceptions.RequestException as e:
            logger.warning(f"Onboarding endpoint unreachable: {str(e)}")
            self.state = Failure(str(e) or GENERIC_SERVER_ERROR)
            return self.state
        except Exception:
            self.state = Idle()
            raise

        if not 200 <= response.status_code < 300:
            message = response.text or GENERIC_SUBMIT_ERROR
            logger.warning(f"Onboarding endpoint rejected submission: {response.status_code}")
            self.state = Failure(message)
            return self.state

        logger.info(f"Onboarding submission accepted: {response.status_code}")
        self.state = Success(form)
        self.reset()
        return self.state
