"""
Home Assistant hub client.

Knows only how to evaluate a template and how to call a service; areas and
lights are handled by the discovery and toggle modules.
"""

from urllib.parse import urljoin, urlparse

import click
import requests

from core.config import require_credentials
from core.errors import ConfigurationError, TransportError
from models.types import Credentials

# (connect, read) seconds
DEFAULT_TIMEOUT = (5, 30)

API_PATH = 'api/'
TEMPLATE_PATH = 'api/template'
SERVICE_PATH = 'api/services/{domain}/{action}'


def validate_base_url(base_url: str) -> str:
    """Check that base_url is an absolute http(s) URL.

    Raises:
        ConfigurationError: If the URL cannot be used
    """
    hint = ("Use an absolute url such as http://homeassistant.local:8123, "
            "e.g. `hacl config --url http://homeassistant.local:8123`")
    parsed = urlparse(base_url)
    if parsed.scheme not in ('http', 'https') or not parsed.hostname:
        raise ConfigurationError(f"Error parsing base url: {base_url!r}", hint=hint)

    # Raises ValueError for a non-numeric or out of range port
    try:
        parsed.port
    except ValueError as e:
        raise ConfigurationError(f"Error parsing base url: {base_url!r}: {e}", hint=hint) from e
    return base_url


class HubClient:
    """Authenticated HTTP client for the Home Assistant REST API.

    A single requests.Session is shared by every call made through the
    client, including calls made from worker threads during discovery.
    """

    def __init__(self, credentials: Credentials, timeout=DEFAULT_TIMEOUT,
                 session: requests.Session | None = None, verbose: bool = False):
        require_credentials(credentials)
        self.base_url = validate_base_url(credentials['base_url'])
        self.timeout = timeout
        self.verbose = verbose
        self.session = session or requests.Session()
        self.session.headers.update({
            'Authorization': f"Bearer {credentials['token']}",
            'Content-Type': 'application/json',
        })

    def __enter__(self) -> 'HubClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self.session.close()

    def url_for(self, path: str) -> str:
        """Resolve a relative API path against the base URL."""
        return urljoin(self.base_url, path)

    def _request(self, method: str, path: str, payload: dict | None = None) -> requests.Response:
        """Send one request and return the response.

        Raises:
            TransportError: On connection errors, timeouts and non-2xx replies
        """
        url = self.url_for(path)
        if self.verbose:
            click.echo(f"→ {method} {url} {payload or ''}", err=True)

        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            hint = None
            if status == 401:
                hint = "Check the API token, e.g. `hacl config --token <token>`"
            raise TransportError(f"Home Assistant returned HTTP {status} for {method} {url}", hint=hint) from e
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Request to Home Assistant timed out: {method} {url}") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f"Error sending request to Home Assistant: {e}",
                hint="Check that Home Assistant is reachable at the configured url"
            ) from e

        if self.verbose:
            click.echo(f"← {response.status_code} {response.text[:200]}", err=True)
        return response

    def evaluate_template(self, expression: str) -> str:
        """Render a template expression on the hub.

        Args:
            expression: Template expression without braces, e.g. "areas()"

        Returns:
            Raw response body
        """
        payload = {'template': f"{{{{ {expression} }}}}"}
        return self._request('POST', TEMPLATE_PATH, payload).text

    def invoke_action(self, domain: str, action: str, entity_id: str):
        """Call a hub service for one entity. The reply body is ignored."""
        path = SERVICE_PATH.format(domain=domain, action=action)
        self._request('POST', path, {'entity_id': entity_id})

    def check_connection(self) -> str:
        """Call the API root and return the hub's status message."""
        response = self._request('GET', API_PATH)
        try:
            return response.json().get('message', 'API running.')
        except (ValueError, AttributeError):
            return response.text
