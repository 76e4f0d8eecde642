# sectiongen/registry.py
"""Fetch sections and components from the remote registry.

The registry serves one JSON document per asset::

    GET {registry_url}/sections/{name}.json    -> section payload
    GET {registry_url}/components/{name}.json  -> component payload

This module:

1. Builds retrieval URLs from an explicit :class:`SectiongenConfig`.
2. Issues the GET request through an ``httpx.Client``.
3. Checks the HTTP status and the payload shape, then validates the fields
   into :class:`SectionComponent` / :class:`Component`.

No authentication, caching or retries.

Public API
----------
- :func:`build_registry_url` - URL for an asset kind and name.
- :class:`RegistryClient` - ``fetch_section`` / ``fetch_component``.
"""

from __future__ import annotations

from typing import Any, Literal, Optional
from urllib.parse import quote

import httpx
import pydantic

from .config import SectiongenConfig
from .errors import ConfigurationError, RetrievalError, ValidationError
from .models import Component, SectionComponent
from .naming import ensure_safe_name
from .notify import Notifier
from .utils.logging import get_logger, log_payload

logger = get_logger(__name__)

AssetKind = Literal["sections", "components"]

# Path segment -> singular label used in messages and errors
_KIND_LABELS: dict[str, str] = {
    "sections": "section",
    "components": "component",
}


# ---------------------------------------------------------------------------
# URL construction
# ---------------------------------------------------------------------------


def build_registry_url(kind: AssetKind, name: str, config: SectiongenConfig) -> str:
    """Return ``{registry_url}/{kind}/{name}.json``.

    The configuration is checked first, so a missing base URL fails before
    any network traffic.  The name is percent-encoded.

    Raises
    ------
    ConfigurationError
        If ``config.registry_url`` is not set.
    ValidationError
        If *name* is not a safe file stem.
    """
    base_url = config.registry_url
    if not base_url:
        raise ConfigurationError(
            "missing base URL: set SECTIONGEN_REGISTRY_URL (or HYDROGEN_UI_URL)"
        )
    if kind not in _KIND_LABELS:
        raise ValueError(f"Unknown asset kind: {kind!r}")

    try:
        safe_name = ensure_safe_name(name)
    except ValueError as exc:
        raise ValidationError(_KIND_LABELS[kind], str(exc)) from exc

    return f"{base_url}/{kind}/{quote(safe_name, safe='')}.json"


# ---------------------------------------------------------------------------
# Fetching
# ---------------------------------------------------------------------------


class RegistryClient:
    """Retrieves registry assets over HTTP.

    Parameters
    ----------
    config:
        Supplies the base URL and the optional request timeout.
    http_client:
        An ``httpx.Client`` to send requests with.  When omitted the
        registry client creates one and closes it in :meth:`close`.
    notifier:
        Receives the "Downloading ..." progress message.
    """

    def __init__(
        self,
        config: SectiongenConfig,
        *,
        http_client: Optional[httpx.Client] = None,
        notifier: Optional[Notifier] = None,
    ):
        self.config = config
        self.notifier = notifier or Notifier()
        self._owns_client = http_client is None
        self._http = http_client

    @property
    def http(self) -> httpx.Client:
        if self._http is None:
            self._http = httpx.Client(follow_redirects=True, timeout=self.config.timeout)
        return self._http

    def close(self) -> None:
        if self._owns_client and self._http is not None:
            self._http.close()
            self._http = None

    def __enter__(self) -> "RegistryClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- public -------------------------------------------------------------

    def fetch_section(self, name: str) -> SectionComponent:
        """Fetch a section by name.

        Raises
        ------
        ConfigurationError
            If no registry URL is configured.
        RetrievalError
            If the registry answers with a non-2xx status.
        ValidationError
            If the body is not a JSON object or fails field validation.
        httpx.TransportError
            If the request itself fails (DNS, refused connection, ...).
        """
        url, data = self._fetch_object("sections", name)
        return self._validate(SectionComponent, "section", url, data)

    def fetch_component(self, name: str) -> Component:
        """Fetch a component by name.  Raises as :meth:`fetch_section`."""
        url, data = self._fetch_object("components", name)
        return self._validate(Component, "component", url, data)

    # -- internals ----------------------------------------------------------

    def _fetch_object(self, kind: AssetKind, name: str) -> tuple[str, dict[str, Any]]:
        label = _KIND_LABELS[kind]
        url = build_registry_url(kind, name, self.config)

        self.notifier.info(f"Downloading {label} {name} from {url}")
        logger.debug(f"GET {url}")

        resp = self.http.get(url)
        if not resp.is_success:
            logger.error(f"Registry returned HTTP {resp.status_code} for {label} {name} ({url})")
            raise RetrievalError(label, url, resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            logger.error(f"Registry response for {label} {name} is not JSON")
            raise ValidationError(label, "response body is not JSON", url=url) from exc

        if not isinstance(data, dict):
            logger.error(
                f"Registry response for {label} {name} is {type(data).__name__}, expected an object"
            )
            raise ValidationError(label, "response body is not a JSON object", url=url)

        log_payload(logger, f"{label} payload from {url}", resp.text)
        return url, data

    @staticmethod
    def _validate(model: type, label: str, url: str, data: dict[str, Any]) -> Any:
        try:
            return model.model_validate(data)
        except pydantic.ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
                for err in exc.errors()
            )
            logger.error(f"Rejected {label} payload from {url}: {problems}")
            raise ValidationError(label, problems, url=url) from exc
