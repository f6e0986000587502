"""Low-level HTTP client for Keycloak Admin API.

Handles authentication, token management, and HTTP operations.
"""
from __future__ import annotations
import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from urllib.parse import unquote, urlsplit

import jwt
import requests

from .exceptions import AuthenticationError, error_for_status

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10
TOKEN_REFRESH_MARGIN = timedelta(seconds=10)


class KeycloakClient:
    """HTTP client for Keycloak Admin API with automatic token management.

    Features:
    - Lazy password-grant authentication on first request
    - Token refresh shortly before the access token expires
    - Centralized error handling

    Usage:
        client = KeycloakClient("http://keycloak:8080", "admin", "admin")
        response = client.get("/admin/realms/demo/users")
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        realm: str = "master",
        client_id: str = "admin-cli",
        timeout: float = REQUEST_TIMEOUT,
        verify: bool = True,
    ):
        """Initialize Keycloak client.

        Args:
            base_url: Keycloak base URL
            username: Admin username
            password: Admin password
            realm: Realm the admin user authenticates against (default: master)
            client_id: Public client used for the password grant
            timeout: Per-request timeout in seconds
            verify: Verify TLS certificates
        """
        self.base_url = base_url.rstrip("/")
        self.username = username
        self.password = password
        self.realm = realm
        self.client_id = client_id
        self.timeout = timeout
        self.verify = verify
        self._token: Optional[str] = None
        self._token_expires_at: Optional[datetime] = None
        self._lock = threading.Lock()

    @property
    def token_url(self) -> str:
        return f"{self.base_url}/realms/{self.realm}/protocol/openid-connect/token"

    def authenticate(self) -> str:
        """Obtain a fresh admin token via direct access grant.

        Returns:
            Access token

        Raises:
            AuthenticationError: If the token endpoint rejects the credentials
        """
        data = {
            "grant_type": "password",
            "client_id": self.client_id,
            "username": self.username,
            "password": self.password,
        }
        resp = requests.post(self.token_url, data=data, timeout=self.timeout, verify=self.verify)
        if resp.status_code != 200:
            raise AuthenticationError(resp.status_code, _error_message(resp), self.token_url)

        payload = resp.json()
        self._token = payload["access_token"]
        self._token_expires_at = _token_expiry(self._token, payload.get("expires_in"))
        logger.info("Authenticated as '%s' against realm '%s'", self.username, self.realm)
        return self._token

    def _ensure_authenticated(self) -> str:
        """Return a valid token, refreshing it if expired or expiring soon."""
        with self._lock:
            now = datetime.now(timezone.utc)
            if (
                not self._token
                or not self._token_expires_at
                or now >= self._token_expires_at - TOKEN_REFRESH_MARGIN
            ):
                self.authenticate()
            return self._token

    def get(self, path: str, params: Optional[Dict] = None, **kwargs) -> requests.Response:
        """Execute GET request with automatic authentication.

        Args:
            path: API endpoint path (e.g., "/admin/realms/demo/users")
            params: Query parameters
            **kwargs: Additional arguments for requests.get

        Returns:
            Response object

        Raises:
            KeycloakAPIError: On HTTP error
        """
        return self._send("get", path, params=params, **kwargs)

    def post(self, path: str, json: Any = None, params: Optional[Dict] = None, **kwargs) -> requests.Response:
        """Execute POST request with automatic authentication.

        Args:
            path: API endpoint path
            json: JSON payload
            params: Query parameters
            **kwargs: Additional arguments for requests.post

        Returns:
            Response object

        Raises:
            KeycloakAPIError: On HTTP error
        """
        return self._send("post", path, json=json, params=params, **kwargs)

    def put(self, path: str, json: Any = None, params: Optional[Dict] = None, **kwargs) -> requests.Response:
        """Execute PUT request with automatic authentication.

        Args:
            path: API endpoint path
            json: JSON payload
            params: Query parameters
            **kwargs: Additional arguments for requests.put

        Returns:
            Response object

        Raises:
            KeycloakAPIError: On HTTP error
        """
        return self._send("put", path, json=json, params=params, **kwargs)

    def delete(self, path: str, json: Any = None, params: Optional[Dict] = None, **kwargs) -> requests.Response:
        """Execute DELETE request with automatic authentication.

        Role mapping removals carry a JSON body, so one is accepted here too.

        Args:
            path: API endpoint path
            json: Optional JSON payload
            params: Query parameters
            **kwargs: Additional arguments for requests.delete

        Returns:
            Response object

        Raises:
            KeycloakAPIError: On HTTP error
        """
        return self._send("delete", path, json=json, params=params, **kwargs)

    def _send(self, verb: str, path: str, **kwargs) -> requests.Response:
        token = self._ensure_authenticated()
        url = f"{self.base_url}{path}"
        headers = dict(kwargs.pop("headers", None) or {})
        headers["Authorization"] = f"Bearer {token}"
        # drop unset body/params so requests does not send "null"
        kwargs = {key: value for key, value in kwargs.items() if value is not None}

        resp = getattr(requests, verb)(
            url, headers=headers, timeout=self.timeout, verify=self.verify, **kwargs
        )
        logger.debug("%s %s -> %s", verb.upper(), path, resp.status_code)
        self._handle_error(resp, path)
        return resp

    def _handle_error(self, resp: requests.Response, path: str) -> None:
        """Centralized error handling for HTTP responses.

        Args:
            resp: Response object to check
            path: Requested API path, reported as the failing endpoint

        Raises:
            KeycloakAPIError: If response status indicates error
        """
        if resp.status_code >= 400:
            message = _error_message(resp)
            logger.warning("Keycloak API error [%s] %s: %s", resp.status_code, path, message)
            raise error_for_status(resp.status_code, message, path)

    @staticmethod
    def id_from_location(resp: requests.Response) -> Optional[str]:
        """Return the id of a created resource from the Location header."""
        location = resp.headers.get("Location")
        if not location:
            return None
        return unquote(urlsplit(location).path.rstrip("/").rsplit("/", 1)[-1])


def _error_message(resp: requests.Response) -> str:
    """Extract Keycloak's error message from a response body."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if isinstance(body, dict):
        for key in ("errorMessage", "error_description", "error"):
            if body.get(key):
                return str(body[key])
    return resp.text


def _token_expiry(token: str, expires_in: Optional[int]) -> datetime:
    """Compute when an access token stops being usable.

    The `exp` claim is read without signature verification; the server is
    the only party that validates the token. Opaque tokens fall back to the
    `expires_in` value of the token response.
    """
    try:
        claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError:
        claims = {}
    if "exp" in claims:
        return datetime.fromtimestamp(int(claims["exp"]), tz=timezone.utc)
    return datetime.now(timezone.utc) + timedelta(seconds=int(expires_in or 60))
