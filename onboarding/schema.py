"""
Onboarding Form Schema
Decodes raw form input into a typed record and renders the canonical payload.
"""

from enum import Enum
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ErrorCode, FieldError


class ServiceType(str, Enum):
    UI_UX = 'UI/UX'
    BRANDING = 'Branding'
    WEB_DEV = 'Web Dev'
    MOBILE_APP = 'Mobile App'


SERVICE_LABELS = [service.value for service in ServiceType]

# HTML checkbox values that mean checked
CHECKED_VALUES = ('on', 'true')

# Wire names, in declaration order
FIELD_NAMES = ['fullName', 'email', 'companyName', 'services', 'budget', 'startDate', 'terms']


class FormInput(BaseModel):
    """Raw onboarding record as typed by the decode stage"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    full_name: str = Field('', alias='fullName')
    email: str = ''
    company_name: str = Field('', alias='companyName')
    services: FrozenSet[ServiceType] = Field(default_factory=frozenset)
    budget: Optional[float] = None
    start_date: str = Field('', alias='startDate')
    terms: bool = False

    @field_validator('terms', mode='before')
    @classmethod
    def terms_literal(cls, v):
        if v is True or v is False:
            return v
        if isinstance(v, str) and v in CHECKED_VALUES:
            return True
        raise ValueError('must be true or false')


def empty_form() -> FormInput:
    """Default shape: empty text, no services, no budget, terms unchecked"""
    return FormInput()


def field_alias(attribute: str) -> str:
    """Map a FormInput attribute name to its wire name"""
    return FormInput.model_fields[attribute].alias or attribute


def _normalize(raw: Mapping) -> Dict[str, Any]:
    """
    Collect known fields from a JSON object or an HTML form multidict

    Missing values, nulls and blank budgets are left out so the model
    defaults apply.
    """
    data = {}
    for name in FIELD_NAMES:
        if name == 'services' and hasattr(raw, 'getlist'):
            value = raw.getlist(name)
        else:
            value = raw.get(name)

        if value is None:
            continue
        if name == 'budget' and isinstance(value, str) and not value.strip():
            continue
        if name == 'services' and isinstance(value, str):
            value = [value]

        data[name] = value
    return data


def _decode_error(field: str, error_type: str) -> FieldError:
    if field == 'services' and error_type == 'enum':
        return FieldError(ErrorCode.INVALID_ENUM, f'must be one of: {", ".join(SERVICE_LABELS)}')
    if field == 'budget':
        return FieldError(ErrorCode.INVALID_TYPE, 'must be a number')
    return FieldError(ErrorCode.INVALID_TYPE, 'has an invalid value')


def decode_form(raw: Mapping) -> Tuple[FormInput, Dict[str, FieldError]]:
    """
    Decode raw form input

    Args:
        raw: JSON object or HTML form data

    Returns:
        Tuple of (FormInput, decode errors keyed by wire name). Fields that
        fail to decode fall back to their defaults in the returned form.
    """
    data = _normalize(raw)

    try:
        return FormInput.model_validate(data), {}
    except ValidationError as e:
        errors = {}
        for error in e.errors():
            field = str(error['loc'][0])
            if field not in errors:
                errors[field] = _decode_error(field, error['type'])

    cleaned = {name: value for name, value in data.items() if name not in errors}
    return FormInput.model_validate(cleaned), errors


def serialize(form: FormInput) -> Dict[str, Any]:
    """
    Render the canonical JSON payload

    Services are listed in declaration order; budget is omitted when absent.
    """
    payload = {
        'fullName': form.full_name,
        'email': form.email,
        'companyName': form.company_name,
        'services': [service.value for service in ServiceType if service in form.services],
    }

    if form.budget is not None:
        budget = form.budget
        payload['budget'] = int(budget) if float(budget).is_integer() else budget

    payload['startDate'] = form.start_date
    payload['terms'] = form.terms
    return payload
