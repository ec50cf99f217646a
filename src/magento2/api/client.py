"""
Magento2 API Client

Holds the store scope and the authenticated transport that every
resource (cart, order) shares. Similar in shape to a vendor SDK
client: resources hold a reference to the client and funnel every
round-trip through ApiClient.request().

Example usage:
    store = StoreConfig(scheme="https", hostname="shop.example.com", store_code="default")
    client = ApiClient.from_integration(store, bearer_token="...")

    cart = client.new_guest_cart()
    cart.add_items([Item(sku="24-MB01", qty=1)])
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from ..shared.constants import (
    GUEST_CART, CUSTOMER_CART, AuthenticationType, Config,
    may_trim_surrounding_quotes,
)
from ..shared.logger import get_logger
from ..cart.cart import Cart
from .errors import (
    AuthenticationError,
    ConfigurationError,
    RemoteError,
    ResponseDecodeError,
    TransportError,
)


logger = get_logger(__name__)


@dataclass
class StoreConfig:
    """Scope of the REST API: which host and which store view."""
    scheme: str = Config.DEFAULT_SCHEME
    hostname: str = ""
    store_code: str = Config.DEFAULT_STORE_CODE

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.hostname}/rest/{self.store_code}/{Config.API_VERSION}"

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "StoreConfig":
        """
        Build a store configuration from environment variables.

        MAGENTO2_HOSTNAME is required; scheme and store code fall
        back to "https" and "default".
        """
        environ = os.environ if environ is None else environ

        hostname = environ.get(Config.ENV_HOSTNAME, "").strip()
        if not hostname:
            raise ConfigurationError(f"{Config.ENV_HOSTNAME} is not set")

        return cls(
            scheme=environ.get(Config.ENV_SCHEME) or Config.DEFAULT_SCHEME,
            hostname=hostname,
            store_code=environ.get(Config.ENV_STORE_CODE) or Config.DEFAULT_STORE_CODE,
        )


class ApiClient:
    """
    Magento2 REST client.

    The session is owned by this client instance and injected into
    every Cart and Order created from it, so independent clients
    (different stores, different tokens) can coexist.
    """

    def __init__(
        self,
        store_config: StoreConfig,
        bearer_token: str = None,
        session: requests.Session = None,
        timeout: int = Config.DEFAULT_TIMEOUT_SECONDS
    ):
        """
        Initialize the client.

        Args:
            store_config: Scheme, hostname and store code
            bearer_token: Integration, admin or customer token
            session: Transport to use (default: a new requests.Session)
            timeout: Per-request timeout in seconds
        """
        if not store_config.hostname:
            raise ConfigurationError("store hostname is required")

        self.store_config = store_config
        self.base_url = store_config.base_url
        self.timeout = timeout

        self.session = session if session is not None else requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })
        if bearer_token:
            self.set_bearer_token(bearer_token)

        self.log = logger.bind(store=store_config.store_code, host=store_config.hostname)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_integration(
        cls,
        store_config: StoreConfig,
        bearer_token: str,
        session: requests.Session = None
    ) -> "ApiClient":
        """Client authenticated with a pre-issued integration token."""
        if not bearer_token:
            raise AuthenticationError("integration token is empty")
        return cls(store_config, bearer_token=bearer_token, session=session)

    @classmethod
    def from_authentication(
        cls,
        store_config: StoreConfig,
        username: str,
        password: str,
        authentication_type: AuthenticationType = AuthenticationType.ADMIN,
        session: requests.Session = None
    ) -> "ApiClient":
        """
        Exchange a username/password pair for a token.

        Magento answers the token endpoints with a bare JSON string,
        e.g. "yd1o9zs1hb1qxnn8ek68eu8nwqjg5hrv".
        """
        client = cls(store_config, session=session)
        response = client.request(
            "POST",
            authentication_type.token_route,
            {"username": username, "password": password},
        )

        token = may_trim_surrounding_quotes(response.text)
        if not token:
            raise AuthenticationError(
                f"no {authentication_type.value} token received for user '{username}'"
            )

        client.set_bearer_token(token)
        client.log.info("obtained token", authentication_type=authentication_type.value)
        return client

    def set_bearer_token(self, token: str):
        self.session.headers["Authorization"] = f"Bearer {token}"

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def url(self, path: str) -> str:
        """Fully-qualified endpoint for a path relative to the REST base."""
        if not path:
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        payload: Any = None
    ) -> requests.Response:
        """
        Make a single HTTP request against the API.

        Raises:
            TransportError: no HTTP response was received
            RemoteError: the status code is >= 400
        """
        url = self.url(path)

        kwargs = {"timeout": self.timeout}
        if payload is not None:
            kwargs["json"] = payload

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            self.log.warning("transport failure", method=method, path=path, error=str(e))
            raise TransportError(
                f"{method} {path} failed: {e}", method=method, url=url
            ) from e

        status = response.status_code
        if status >= 400:
            self.log.warning("unexpected status", method=method, path=path, status=status)
            raise RemoteError(
                f"{method} {path} returned an error",
                status_code=status,
                body=response.text,
            )

        self.log.debug("request", method=method, path=path, status=status)
        return response

    def request_json(self, method: str, path: str, payload: Any = None) -> Any:
        """Like request(), but decode the JSON body."""
        return self.decode_json(self.request(method, path, payload))

    @staticmethod
    def decode_json(response: requests.Response) -> Any:
        """
        Decode a response body as JSON.

        Raises:
            ResponseDecodeError: the body is not JSON
        """
        try:
            return response.json()
        except ValueError as e:
            raise ResponseDecodeError(
                f"response body is not JSON (status {response.status_code})",
                status_code=response.status_code,
                body=response.text,
            ) from e

    # -------------------------------------------------------------------------
    # Carts
    # -------------------------------------------------------------------------

    def new_guest_cart(self) -> Cart:
        """Create an anonymous cart; its route is keyed by the masked quote id."""
        response = self.request("POST", GUEST_CART)
        quote_id = self._quote_id_from(response)

        cart = Cart(f"{GUEST_CART}/{quote_id}", quote_id, self)
        cart.update_self()
        return cart

    def new_customer_cart(self) -> Cart:
        """Create (or reuse) the cart of the customer owning the token."""
        response = self.request("POST", CUSTOMER_CART)
        quote_id = self._quote_id_from(response)

        cart = Cart(CUSTOMER_CART, quote_id, self)
        cart.update_self()
        return cart

    def cart(self, route: str, quote_id: str) -> Cart:
        """Attach to an existing cart. No request is made."""
        return Cart(route, str(quote_id), self)

    @staticmethod
    def _quote_id_from(response: requests.Response) -> str:
        quote_id = may_trim_surrounding_quotes(response.text)
        if not quote_id:
            raise ResponseDecodeError(
                "cart creation returned no quote id",
                status_code=response.status_code,
                body=response.text,
            )
        return quote_id

    def __repr__(self):
        return f"ApiClient(base_url={self.base_url!r})"
