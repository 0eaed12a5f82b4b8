"""Domain parsing and DNS syntax rules.

A :class:`Domain` is a ``label`` (everything left of the public suffix, which
may itself contain dots) plus a ``tld`` (the public suffix as listed in the
Public Suffix List, e.g. ``com``, ``co.uk`` or ``com.mx``). Original case is
preserved for emission; comparison always goes through :attr:`Domain.key`.

INVARIANT: lengths are measured on the ACE (``xn--``) form, so IDN labels are
bounded by the same 63/253 octet limits as ASCII ones.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import idna
import tldextract

from domfuzz.domain.errors import InvalidDomainError

MAX_LABEL_OCTETS = 63
MAX_NAME_OCTETS = 253

# Country TLD -> registry second-level domains (wrong-SLD swaps).
SECOND_LEVEL_DOMAINS: dict[str, tuple[str, ...]] = {
    "uk": ("co.uk", "org.uk", "net.uk", "ac.uk", "gov.uk", "sch.uk"),
    "au": ("com.au", "net.au", "org.au", "edu.au", "gov.au", "asn.au"),
    "nz": ("co.nz", "net.nz", "org.nz", "ac.nz", "govt.nz", "school.nz"),
    "za": ("co.za", "net.za", "org.za", "edu.za", "gov.za", "ac.za"),
    "ca": ("co.ca", "net.ca", "org.ca", "gc.ca", "ab.ca", "bc.ca"),
    "br": ("com.br", "net.br", "org.br", "edu.br", "gov.br", "mil.br"),
    "in": ("co.in", "net.in", "org.in", "edu.in", "gov.in", "ac.in"),
    "cn": ("com.cn", "net.cn", "org.cn", "edu.cn", "gov.cn", "ac.cn"),
    "jp": ("co.jp", "ne.jp", "or.jp", "ac.jp", "go.jp", "ad.jp"),
}

# Bundled suffix-list snapshot only: parsing never touches the network.
_SUFFIXES = tldextract.TLDExtract(suffix_list_urls=(), cache_dir=None)
_SCHEME = re.compile(r"^[a-z][a-z0-9+.-]*://", re.IGNORECASE)
_ASCII_LABEL = re.compile(r"^[a-z0-9-]+$", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class Domain:
    """A parsed domain name: ``label`` + ``tld``."""

    label: str
    tld: str

    @property
    def name(self) -> str:
        return f"{self.label}.{self.tld}"

    @property
    def key(self) -> str:
        """Case-insensitive comparison key."""
        return self.name.lower()

    @property
    def registrable(self) -> Domain:
        """The right-most label plus the suffix (drops injected subdomains)."""
        return Domain(self.label.rsplit(".", 1)[-1], self.tld)

    @property
    def is_ascii(self) -> bool:
        return self.name.isascii()

    def with_label(self, label: str) -> Domain:
        return Domain(label, self.tld)

    def with_tld(self, tld: str) -> Domain:
        return Domain(self.label, tld)

    def __str__(self) -> str:
        return self.name


def split_suffix(name: str) -> tuple[str, str]:
    """Split *name* into ``(label, tld)`` on its public suffix.

    Names whose suffix is not on the list (or that are nothing but a
    suffix) split on the last dot.
    """
    parts = _SUFFIXES(name)
    if parts.suffix and parts.domain:
        labels = name.split(".")
        depth = parts.suffix.count(".") + 1
        return ".".join(labels[:-depth]), ".".join(labels[-depth:])
    label, _, tld = name.rpartition(".")
    return label, tld


def parse_domain(raw: str) -> Domain:
    """Parse user input into a :class:`Domain`.

    Accepts a bare name or a URL; strips scheme, path, port, and the root dot.

    Raises:
        InvalidDomainError: the input has no label/TLD split or breaks DNS syntax.
    """
    text = _SCHEME.sub("", raw.strip())
    text = text.split("/", 1)[0].split(":", 1)[0].rstrip(".")
    if "." not in text:
        raise InvalidDomainError(f"Cannot split {raw!r} into label and TLD", domain=raw)

    label, tld = split_suffix(text)
    if not label or not tld:
        raise InvalidDomainError(f"Cannot split {raw!r} into label and TLD", domain=raw)
    if not is_valid_hostname(text, allow_unicode=not text.isascii()):
        raise InvalidDomainError(f"{raw!r} is not a valid domain name", domain=raw)
    return Domain(label, tld)


# ---------------------------------------------------------------------------
# DNS syntax
# ---------------------------------------------------------------------------


def to_ace(label: str) -> str:
    """Return the IDNA 2008 ACE form of *label* (unchanged when already ASCII).

    Raises:
        idna.IDNAError: the label holds code points IDNA disallows.
    """
    if label.isascii():
        return label
    return idna.encode(label.lower()).decode("ascii")


def is_valid_label(label: str, *, allow_unicode: bool = False) -> bool:
    """Check a single label against RFC 1035 syntax (IDNA 2008 for unicode labels)."""
    if not label or label[0] == "-" or label[-1] == "-":
        return False
    if label.isascii():
        return bool(_ASCII_LABEL.match(label)) and len(label) <= MAX_LABEL_OCTETS
    if not allow_unicode:
        return False
    try:
        return len(to_ace(label)) <= MAX_LABEL_OCTETS
    except idna.IDNAError:
        return False


def _is_valid_top_label(label: str) -> bool:
    if label.isascii():
        return len(label) >= 2 and (label.isalpha() or label.lower().startswith("xn--"))
    return not any(ch.isdigit() for ch in label)


def is_valid_hostname(name: str, *, allow_unicode: bool = False) -> bool:
    """Check a full name: label syntax, octet limits, and a plausible TLD."""
    labels = name.split(".")
    if len(labels) < 2:
        return False
    if not all(is_valid_label(label, allow_unicode=allow_unicode) for label in labels):
        return False
    if not _is_valid_top_label(labels[-1]):
        return False
    return len(".".join(to_ace(label) for label in labels)) <= MAX_NAME_OCTETS
