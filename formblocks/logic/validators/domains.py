"""
Allowed-domain matching shared by the email and url validators.

An entry {domain, exact} matches a host when the host equals the domain
(exact) or ends with it (subdomains allowed). A host of None never matches.
"""

from typing import Callable, List, Optional
from urllib.parse import urlsplit

from formblocks.blocks.models import AllowedDomain
from formblocks.logic.list_format import format_disjunction
from formblocks.logic.validators.base import Check, IssueCode


def email_host(value: str) -> Optional[str]:
    parts = value.split("@")
    if len(parts) < 2:
        return None
    return parts[1]


def url_host(value: str) -> Optional[str]:
    """Hostname of a URL, with internationalized labels in punycode form."""
    try:
        host = urlsplit(value).hostname
    except ValueError:
        return None
    if not host:
        return None
    try:
        return host.encode("idna").decode("ascii")
    except UnicodeError:
        return None


def domain_matches(host: Optional[str], allowed: List[AllowedDomain]) -> bool:
    if not host:
        return False
    return any(
        host == entry.domain if entry.exact else host.endswith(entry.domain)
        for entry in allowed
    )


def allowed_domains_message(allowed: List[AllowedDomain]) -> str:
    quoted = ['"%s"' % entry.domain for entry in allowed]
    return f"Domain must be {format_disjunction(quoted)}."


def allowed_domains_check(
    allowed: List[AllowedDomain],
    extract_host: Callable[[str], Optional[str]],
) -> Check:
    return Check(
        predicate=lambda value: domain_matches(extract_host(value), allowed),
        message=allowed_domains_message(allowed),
        code=IssueCode.MEMBERSHIP,
    )
