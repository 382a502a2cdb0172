"""
Onboarding endpoint integration
"""

import requests
from typing import Any, Dict


class OnboardingClient:
    """Sends onboarding payloads to the configured endpoint"""

    def __init__(self, endpoint: str, session: requests.Session = None):
        self.endpoint = endpoint
        self.session = session or requests.Session()

    def send(self, payload: Dict[str, Any]) -> requests.Response:
        """
        POST a payload to the onboarding endpoint.

        One attempt, no retries. Transport faults propagate as
        requests.exceptions.RequestException.

        Args:
            payload: Canonical onboarding payload

        Returns:
            The endpoint's response, whatever its status
        """
        headers = {
            'Content-Type': 'application/json'
        }

        return self.session.post(
            self.endpoint,
            headers=headers,
            json=payload
        )
