"""NetworkResolver: classify a registrable domain as available, registered, or parked.

Lookup order, each step optional:

1. RDAP over HTTPS for TLDs with a known endpoint (404 means available).
2. WHOIS through python-whois (run in a worker thread), classified by the
   parsed record and the raw response keywords.
3. DNS A lookup; a resolving name may get an HTTP probe for parking pages.

The first step that reaches a verdict wins. Steps that fail or stay
inconclusive fall through; if none decides, :class:`ResolutionFailureError`
is raised and the checker records an ``error`` status.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import dns.asyncresolver
import dns.exception
import dns.resolver
import httpx
import whois

from domfuzz import __version__
from domfuzz.domain.errors import NetworkTimeoutError, ResolutionFailureError
from domfuzz.domain.names import to_ace
from domfuzz.domain.types import Classification

logger = logging.getLogger(__name__)

RETRY_DELAY = 0.5
USER_AGENT = f"domfuzz/{__version__}"

RDAP_ENDPOINTS: dict[str, str] = {
    "com": "https://rdap.verisign.com/com/v1/domain/",
    "net": "https://rdap.verisign.com/net/v1/domain/",
    "org": "https://rdap.publicinterestregistry.org/rdap/domain/",
    "info": "https://rdap.identitydigital.services/rdap/domain/",
    "biz": "https://rdap.nic.biz/domain/",
    "app": "https://rdap.nic.google/domain/",
    "dev": "https://rdap.nic.google/domain/",
    "page": "https://rdap.nic.google/domain/",
    "xyz": "https://rdap.nic.xyz/domain/",
    "tech": "https://rdap.nic.tech/domain/",
    "online": "https://rdap.nic.online/domain/",
    "site": "https://rdap.nic.site/domain/",
    "io": "https://rdap.identitydigital.services/rdap/domain/",
    "ai": "https://rdap.nic.ai/domain/",
    "co": "https://rdap.nic.co/domain/",
    "me": "https://rdap.nic.me/domain/",
    "us": "https://rdap.nic.us/domain/",
    "uk": "https://rdap.nominet.uk/domain/",
    "de": "https://rdap.denic.de/domain/",
    "ca": "https://rdap.cira.ca/domain/",
    "au": "https://rdap.auda.org.au/domain/",
    "fr": "https://rdap.nic.fr/domain/",
    "jp": "https://rdap.jprs.jp/domain/",
    "br": "https://rdap.registro.br/domain/",
    "in": "https://rdap.registry.in/domain/",
    "cn": "https://rdap.cnnic.cn/domain/",
    "tv": "https://rdap.verisign.com/tv/v1/domain/",
    "cc": "https://rdap.verisign.com/cc/v1/domain/",
}

_RDAP_PARKED_STATUSES = ("client hold", "redemption", "pending delete")
_PARKING_REGISTRARS = ("sedo", "parking", "bodis", "hugedomains")
_WHOIS_AVAILABLE = (
    "no match",
    "not found",
    "no entries found",
    "domain status: available",
    "no data found",
)
_WHOIS_REGISTERED = ("registrar:", "registrant:", "creation date:", "created:")
_WHOIS_PARKED = ("parked", "parking", "domain for sale", "sedo", "bodis")
_PAGE_PARKED = (
    "parked",
    "domain for sale",
    "this domain may be for sale",
    "sedo",
    "parking",
    "under construction",
    "coming soon",
)


# ---------------------------------------------------------------------------
# Pure classifiers
# ---------------------------------------------------------------------------


def _registrar_name(entity: dict[str, Any]) -> str | None:
    vcard = entity.get("vcardArray")
    if isinstance(vcard, list) and len(vcard) > 1 and isinstance(vcard[1], list):
        for item in vcard[1]:
            if isinstance(item, list) and len(item) >= 4 and item[0] == "fn":
                return str(item[3])
    public_ids = entity.get("publicIds") or []
    if public_ids and isinstance(public_ids[0], dict) and "identifier" in public_ids[0]:
        return str(public_ids[0]["identifier"])
    name = entity.get("handle") or entity.get("name")
    return str(name) if name else None


def rdap_is_parked(payload: dict[str, Any]) -> bool:
    """Parking hints in an RDAP domain object: hold statuses or a parking registrar."""
    for status in payload.get("status") or ():
        if any(marker in str(status).lower() for marker in _RDAP_PARKED_STATUSES):
            return True
    for entity in payload.get("entities") or ():
        if "registrar" not in (entity.get("roles") or ()):
            continue
        name = (_registrar_name(entity) or "").lower()
        if any(marker in name for marker in _PARKING_REGISTRARS):
            return True
    return False


def classify_rdap(status_code: int, payload: dict[str, Any] | None = None) -> Classification | None:
    """Map an RDAP response to a classification; None when inconclusive."""
    if status_code == 404:
        return Classification.AVAILABLE
    if status_code == 200:
        if payload and rdap_is_parked(payload):
            return Classification.PARKED
        return Classification.REGISTERED
    return None


def classify_whois(text: str) -> Classification | None:
    lowered = text.lower()
    if any(marker in lowered for marker in _WHOIS_AVAILABLE):
        return Classification.AVAILABLE
    if any(marker in lowered for marker in _WHOIS_REGISTERED):
        if any(marker in lowered for marker in _WHOIS_PARKED):
            return Classification.PARKED
        return Classification.REGISTERED
    return None


def classify_whois_entry(entry: Any) -> Classification | None:
    """Classify a parsed WHOIS record; None when it carries no verdict."""
    verdict = classify_whois(getattr(entry, "text", None) or "")
    if verdict is not None:
        return verdict
    if entry.get("registrar") or entry.get("creation_date"):
        registrar = str(entry.get("registrar") or "").lower()
        if any(marker in registrar for marker in _PARKING_REGISTRARS):
            return Classification.PARKED
        return Classification.REGISTERED
    return None


def looks_parked(page: str) -> bool:
    lowered = page.lower()
    return any(marker in lowered for marker in _PAGE_PARKED)


def ace_name(name: str) -> str:
    return ".".join(to_ace(label) for label in name.split("."))


# ---------------------------------------------------------------------------
# NetworkResolver
# ---------------------------------------------------------------------------


class NetworkResolver:
    """Default :class:`~domfuzz.services.checker.Resolver`.

    Use as an async context manager so the shared HTTP client is closed::

        async with NetworkResolver() as resolver:
            status = await resolver.resolve("example.com", 5.0)
    """

    def __init__(
        self,
        *,
        use_rdap: bool = True,
        use_whois: bool = True,
        use_dns: bool = True,
        http_probe: bool = False,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.use_rdap = use_rdap
        self.use_whois = use_whois
        self.use_dns = use_dns
        self.http_probe = http_probe
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> NetworkResolver:
        if self._client is None:
            self._client = httpx.AsyncClient(headers={"User-Agent": USER_AGENT}, follow_redirects=True)
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("NetworkResolver used outside 'async with'")
        return self._client

    async def resolve(self, name: str, timeout: float) -> Classification:
        ace = ace_name(name).lower()
        tld = ace.rsplit(".", 1)[-1]

        if self.use_rdap and tld in RDAP_ENDPOINTS:
            try:
                verdict = await self._rdap(RDAP_ENDPOINTS[tld] + ace, timeout)
            except httpx.HTTPError:
                logger.debug("RDAP lookup failed for %s", ace, exc_info=True)
            else:
                if verdict is not None:
                    return verdict

        if self.use_whois:
            try:
                verdict = await self._whois(ace, timeout)
            except OSError:
                logger.debug("WHOIS lookup failed for %s", ace, exc_info=True)
            else:
                if verdict is not None:
                    return verdict

        if self.use_dns:
            return await self._dns(ace, timeout)

        raise ResolutionFailureError(f"Could not determine status of {name}", domain=name)

    async def _rdap(self, url: str, timeout: float) -> Classification | None:
        response = await self.client.get(url, timeout=timeout)
        if response.status_code == 429:
            await asyncio.sleep(RETRY_DELAY)
            response = await self.client.get(url, timeout=timeout)
        payload = None
        if response.status_code == 200:
            try:
                payload = response.json()
            except ValueError:
                payload = None
        return classify_rdap(response.status_code, payload if isinstance(payload, dict) else None)

    async def _whois(self, name: str, timeout: float) -> Classification | None:
        try:
            entry = await asyncio.wait_for(asyncio.to_thread(whois.whois, name), timeout)
        except whois.parser.PywhoisError as exc:
            return classify_whois(str(exc)) or Classification.AVAILABLE
        return classify_whois_entry(entry)

    async def _dns(self, name: str, timeout: float) -> Classification:
        resolver = dns.asyncresolver.Resolver()
        resolver.timeout = timeout
        resolver.lifetime = timeout
        try:
            await resolver.resolve(name, "A")
        except (dns.resolver.NXDOMAIN, dns.resolver.NoNameservers):
            return Classification.AVAILABLE
        except dns.resolver.NoAnswer:
            return Classification.REGISTERED
        except dns.exception.Timeout as exc:
            raise NetworkTimeoutError(f"DNS lookup timed out for {name}", domain=name) from exc

        if self.http_probe and await self._probe_parked(name, timeout):
            return Classification.PARKED
        return Classification.REGISTERED

    async def _probe_parked(self, name: str, timeout: float) -> bool:
        for scheme in ("http", "https"):
            try:
                response = await self.client.get(f"{scheme}://{name}", timeout=timeout)
            except httpx.HTTPError:
                continue
            if response.is_success:
                return looks_parked(response.text)
        return False
