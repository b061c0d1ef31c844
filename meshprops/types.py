"""Value types returned by the property helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class EnvoyTrafficDirection(IntEnum):
    """Direction of traffic relative to the local proxy."""

    UNSPECIFIED = 0
    INBOUND = 1
    OUTBOUND = 2

    @classmethod
    def _missing_(cls, value):
        return cls.UNSPECIFIED

    def __str__(self) -> str:
        return self.name


@dataclass
class EnvoyLocality:
    """Where the proxy or an upstream host runs."""

    region: str = ""
    zone: str = ""
    subzone: str = ""


@dataclass
class EnvoyExtension:
    """Identification of a proxy extension."""

    name: str = ""
    category: str = ""
    type_urls: list[str] = field(default_factory=list)


@dataclass
class IstioService:
    """Host, name and namespace of a mesh service."""

    host: str = ""
    name: str = ""
    namespace: str = ""


@dataclass
class IstioFilterMetadata:
    """Filter metadata attached to listeners, clusters, routes or endpoints."""

    config: str = ""
    services: list[IstioService] = field(default_factory=list)


@dataclass
class IstioProxyStatsMatcher:
    """Name matchers for additional proxy stats; None marks an absent component."""

    inclusion_prefixes: list[str] | None = None
    inclusion_regexps: list[str] | None = None
    inclusion_suffixes: list[str] | None = None


class IstioTrafficInterceptionMode(IntEnum):
    """How workload traffic is captured and sent to the proxy."""

    NONE = 0
    TPROXY = 1
    REDIRECT = 2

    @classmethod
    def _missing_(cls, value):
        return cls.REDIRECT

    def __str__(self) -> str:
        return self.name


def parse_istio_traffic_interception_mode(text: str) -> IstioTrafficInterceptionMode:
    """Parse NONE, TPROXY or REDIRECT; anything else raises ValueError."""
    try:
        return IstioTrafficInterceptionMode[text]
    except KeyError:
        raise ValueError(f"invalid IstioTrafficInterceptionMode: {text}") from None