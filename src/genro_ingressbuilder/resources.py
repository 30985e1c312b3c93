# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Routing resource value types.

Plain slotted dataclasses mirroring the networking/v1 Ingress shape, used as
build targets. Each class is default-constructible to its zero value:

- scalar fields default to '' or 0
- singular children that may be absent default to None
- ordered collections default to an empty list

Example:
    >>> rule = IngressRule(host='foo')
    >>> rule.http is None
    True
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ServiceBackendPort:
    """A service port, referenced by name or by number."""

    name: str = ''
    number: int = 0


@dataclass(slots=True)
class IngressServiceBackend:
    """A service referenced as a backend."""

    name: str = ''
    port: ServiceBackendPort = field(default_factory=ServiceBackendPort)


@dataclass(slots=True)
class IngressBackend:
    service: IngressServiceBackend | None = None


@dataclass(slots=True)
class HTTPIngressPath:
    """A path string routed to a backend."""

    path: str = ''
    path_type: str | None = None
    backend: IngressBackend = field(default_factory=IngressBackend)


@dataclass(slots=True)
class HTTPIngressRuleValue:
    paths: list[HTTPIngressPath] = field(default_factory=list)


@dataclass(slots=True)
class IngressRule:
    """Routing for one host. http is None until paths are attached."""

    host: str = ''
    http: HTTPIngressRuleValue | None = None


@dataclass(slots=True)
class IngressTLS:
    """A TLS secret and the hosts it covers."""

    hosts: list[str] = field(default_factory=list)
    secret_name: str = ''


@dataclass(slots=True)
class IngressSpec:
    ingress_class_name: str | None = None
    default_backend: IngressBackend | None = None
    tls: list[IngressTLS] = field(default_factory=list)
    rules: list[IngressRule] = field(default_factory=list)


@dataclass(slots=True)
class ObjectMeta:
    """Resource metadata. Mappings stay None until an entry is set."""

    name: str = ''
    namespace: str = ''
    labels: dict[str, str] | None = None
    annotations: dict[str, str] | None = None


@dataclass(slots=True)
class Ingress:
    """Root routing resource."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: IngressSpec = field(default_factory=IngressSpec)
