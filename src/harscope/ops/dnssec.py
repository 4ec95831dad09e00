"""Domain listing and DNSSEC audit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

import dns.exception
import dns.flags
import dns.rdatatype
import dns.resolver

from ..domains.tree import hosts_from_har

SIGNED = "signed"
UNSIGNED = "unsigned"
LOOKUP_FAILED = "lookup_failed"


@dataclass
class DnssecResult:
    """DNSSEC status of one domain."""

    domain: str
    status: str
    error: Optional[str] = None

    @property
    def signed(self) -> bool:
        return self.status == SIGNED

    def describe(self) -> str:
        """One-line human readable summary."""
        if self.status == SIGNED:
            return f"DNSSEC Signature found for {self.domain}"
        if self.status == UNSIGNED:
            return f"{self.domain} Doesn't seem to use DNSSEC"
        return f"{self.domain}: DNS Lookup Failed"


def list_domains(document: dict) -> list[str]:
    """Unique request hosts, sorted by their reversed spelling.

    Sorting on the reversed string keeps hosts of the same parent domain
    next to each other (api.example.com beside www.example.com).
    """
    domains = {host for host in hosts_from_har(document) if host}
    return sorted(domains, key=lambda d: d[::-1])


def make_resolver(lifetime: float = 5.0) -> dns.resolver.Resolver:
    """System resolver with the DNSSEC OK bit set on every query."""
    resolver = dns.resolver.Resolver()
    resolver.use_edns(0, dns.flags.DO, 1232)
    resolver.lifetime = lifetime
    return resolver


def audit_domain(domain: str, resolver) -> DnssecResult:
    """Look the domain up and check the answer section for RRSIG records.

    Args:
        domain: Hostname to check
        resolver: dns.resolver.Resolver (or anything with the same resolve())

    Returns:
        DnssecResult; lookup errors are reported, never raised
    """
    qname = domain.rstrip(".") + "."
    try:
        answer = resolver.resolve(qname, "A", raise_on_no_answer=False)
    except dns.resolver.NXDOMAIN:
        return DnssecResult(domain, LOOKUP_FAILED, "NXDOMAIN")
    except dns.resolver.NoNameservers as e:
        return DnssecResult(domain, LOOKUP_FAILED, str(e))
    except dns.exception.Timeout:
        return DnssecResult(domain, LOOKUP_FAILED, "timeout")
    except dns.exception.DNSException as e:
        return DnssecResult(domain, LOOKUP_FAILED, str(e))

    rrsets = answer.response.answer if answer.response is not None else []
    if any(rrset.rdtype == dns.rdatatype.RRSIG for rrset in rrsets):
        return DnssecResult(domain, SIGNED)
    return DnssecResult(domain, UNSIGNED)


def audit_domains(
    domains: Iterable[str],
    resolver=None,
    lifetime: float = 5.0,
) -> list[DnssecResult]:
    """Audit domains one after another.

    Raises:
        dns.resolver.NoResolverConfiguration: no resolver given and the
            system has no resolver configuration
    """
    if resolver is None:
        resolver = make_resolver(lifetime)
    return [audit_domain(domain, resolver) for domain in domains]
