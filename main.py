"""
Client Onboarding Service

Serves the client onboarding form and forwards validated submissions
to the configured onboarding endpoint.
"""

from flask import Flask, jsonify, redirect, url_for

from config import Settings, load_settings
from logging_setup import setup_logging
from onboarding import OnboardingClient, onboarding_bp


def create_app(settings: Settings = None) -> Flask:
    """
    Build the Flask app

    Args:
        settings: Explicit settings; read from the environment when omitted

    Raises:
        ConfigurationError: if the onboarding endpoint is not configured
    """
    settings = settings or load_settings()
    logger = setup_logging('client-onboarding', log_level=settings.log_level)

    app = Flask(__name__)
    app.config['SECRET_KEY'] = settings.secret_key
    app.config['ONBOARD_URL'] = settings.onboard_url

    # Shared by every request's submitter
    app.extensions['onboarding_client'] = OnboardingClient(settings.onboard_url)

    # Register blueprints
    app.register_blueprint(onboarding_bp)

    @app.route('/', methods=['GET'])
    def index():
        return redirect(url_for('onboarding.show_onboarding_form'))

    @app.route('/health', methods=['GET'])
    def health():
        """Health check endpoint"""
        return jsonify({'status': 'healthy', 'service': 'client-onboarding'}), 200

    logger.info(f"Onboarding submissions go to {settings.onboard_url}")
    return app


if __name__ == '__main__':
    settings = load_settings()
    create_app(settings).run(host='0.0.0.0', port=settings.port)
