"""
Manifest transport for the autoupdate updater
"""

import logging
from typing import Mapping, Optional, Protocol

import requests

from autoupdate import __version__
from autoupdate.updater.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f'AutoUpdate-Checker/{__version__}'


class Transport(Protocol):
    """Anything that can fetch manifest text from a URI"""

    def fetch(self, uri: str, headers: Optional[Mapping[str, str]] = None) -> str:
        ...


class HttpTransport:
    """
    Fetches manifest text over HTTP(S) with requests.

    Any network or HTTP failure is raised as TransportError. There is no
    retry; a timeout, if wanted, is set here.
    """

    def __init__(self, timeout: float = 30, verify_tls: bool = True,
                 session: Optional[requests.Session] = None,
                 user_agent: str = DEFAULT_USER_AGENT):
        """
        Initialize the transport.

        Args:
            timeout: Request timeout in seconds (default: 30)
            verify_tls: Whether to verify TLS certificates (default: True)
            session: Optional requests.Session to reuse
            user_agent: User-Agent header sent unless the caller overrides it
        """
        self.timeout = timeout
        self.verify_tls = verify_tls
        self.session = session
        self.user_agent = user_agent

    def fetch(self, uri: str, headers: Optional[Mapping[str, str]] = None) -> str:
        """
        GET the given URI and return the response body as text.

        Args:
            uri: Manifest URI
            headers: Optional extra request headers

        Returns:
            Response body

        Raises:
            TransportError: If the request fails or returns an HTTP error status
        """
        request_headers = {'User-Agent': self.user_agent}
        if headers:
            request_headers.update(headers)

        getter = self.session.get if self.session is not None else requests.get

        logger.debug("GET %s", uri)
        try:
            response = getter(
                uri,
                headers=request_headers,
                timeout=self.timeout,
                verify=self.verify_tls,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise TransportError(f"HTTP {status} fetching {uri}", uri=uri, status_code=status) from e
        except requests.RequestException as e:
            raise TransportError(f"Failed to fetch {uri}: {e}", uri=uri) from e

        return response.text
