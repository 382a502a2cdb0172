"""
Client Onboarding Form Routes
Web form for collecting client information and forwarding it to the onboarding endpoint.
"""

import json
from flask import Blueprint, current_app, jsonify, render_template, request

from .schema import FIELD_NAMES, SERVICE_LABELS, decode_form, empty_form, serialize
from .submission import Failure, OnboardingSubmitter, Success
from .validation import check_form, check_field


# Create Blueprint
onboarding_bp = Blueprint('onboarding', __name__,
                          template_folder='templates',
                          url_prefix='/onboard')


def get_submitter() -> OnboardingSubmitter:
    """Build a submitter for the current request around the app's endpoint client"""
    return OnboardingSubmitter(current_app.extensions['onboarding_client'])


def _raw_values(form_data) -> dict:
    """Echo submitted values back into the form"""
    return {
        'fullName': form_data.get('fullName', ''),
        'email': form_data.get('email', ''),
        'companyName': form_data.get('companyName', ''),
        'services': form_data.getlist('services'),
        'budget': form_data.get('budget', ''),
        'startDate': form_data.get('startDate', ''),
        'terms': bool(form_data.get('terms')),
    }


def _render(submitter: OnboardingSubmitter, values: dict, status: int = 200):
    state = submitter.state
    success_json = None
    if isinstance(state, Success):
        success_json = json.dumps(serialize(state.payload), indent=2)

    return render_template('onboarding.html',
                           values=values,
                           errors=submitter.errors,
                           services=SERVICE_LABELS,
                           submit_error=state.message if isinstance(state, Failure) else None,
                           submit_success=success_json), status


@onboarding_bp.route('/', methods=['GET'])
def show_onboarding_form():
    """Display an empty onboarding form"""
    submitter = get_submitter()
    return _render(submitter, serialize(empty_form()))


@onboarding_bp.route('/', methods=['POST'])
def process_onboarding_form():
    """
    Process the submitted onboarding form

    Field errors re-render the form with the submitted values (400). A
    failed submission keeps the values and shows the error (502). A
    successful one shows the payload and an empty form.
    """
    submitter = get_submitter()
    submitter.load(request.form)
    outcome = submitter.submit()

    if outcome is None:
        return _render(submitter, _raw_values(request.form), 400)

    if isinstance(outcome, Failure):
        return _render(submitter, _raw_values(request.form), 502)

    return _render(submitter, serialize(submitter.form))


@onboarding_bp.route('/validate', methods=['POST'])
def validate_onboarding_input():
    """
    Validate form input without submitting it.
    Called from the page while the user types.

    Expected JSON payload: the form fields by wire name. An optional
    ?field=<name> query parameter limits the result to that field.

    Returns:
    {
        "valid": false,
        "errors": {"email": "Invalid email address"}
    }
    """
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({'error': 'No JSON data provided'}), 400

    field = request.args.get('field')
    if field and field not in FIELD_NAMES:
        return jsonify({'error': f'Unknown field: {field}'}), 400

    form, decode_errors = decode_form(data)

    if field:
        error = decode_errors.get(field) or check_field(form, field)
        errors = {field: error.message} if error else {}
    else:
        found = check_form(form)
        found.update(decode_errors)
        errors = {name: error.message for name, error in found.items()}

    return jsonify({'valid': not errors, 'errors': errors})
