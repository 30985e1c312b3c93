# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Ingress builder vocabulary - one small set of mutation units per level.

Each level of the routing resource has a build_* constructor and the unit
factories that apply to it. Nesting is expressed by passing child-level
units to a parent-level unit:

    >>> ingress = build_ingress(
    ...     namespace('testing'),
    ...     rules(
    ...         rule(host('foo'), paths(
    ...             one_path(path('/bar'), backend('service1', ServiceBackendPort(number=80))),
    ...         )),
    ...     ),
    ...     tlses(tls('tls-secret', 'foo')),
    ... )

Hierarchy:
    ingress
      ├── metadata: namespace, name, annotation, label
      └── spec
            ├── default_backend (backend level)
            ├── rule
            │     └── http
            │           └── one_path
            │                 └── backend
            └── tls
"""

from __future__ import annotations

from ..mutation import Mutation, append, assign, build, nest, set_entry
from ..resources import (
    HTTPIngressPath,
    HTTPIngressRuleValue,
    Ingress,
    IngressBackend,
    IngressRule,
    IngressSpec,
    IngressTLS,
    ServiceBackendPort,
)


# ==================== Constructors ====================

def build_ingress(*mutations: Mutation[Ingress]) -> Ingress:
    """Build an Ingress from ingress-level units."""
    return build(Ingress, *mutations)


def build_spec(*mutations: Mutation[IngressSpec]) -> IngressSpec:
    return build(IngressSpec, *mutations)


def build_rule(*mutations: Mutation[IngressRule]) -> IngressRule:
    return build(IngressRule, *mutations)


def build_http(*mutations: Mutation[HTTPIngressRuleValue]) -> HTTPIngressRuleValue:
    return build(HTTPIngressRuleValue, *mutations)


def build_path(*mutations: Mutation[HTTPIngressPath]) -> HTTPIngressPath:
    return build(HTTPIngressPath, *mutations)


def build_backend(*mutations: Mutation[IngressBackend]) -> IngressBackend:
    return build(IngressBackend, *mutations)


def build_tls(*mutations: Mutation[IngressTLS]) -> IngressTLS:
    return build(IngressTLS, *mutations)


# ==================== Ingress ====================

def namespace(value: str) -> Mutation[Ingress]:
    return assign('metadata.namespace', value)


def name(value: str) -> Mutation[Ingress]:
    return assign('metadata.name', value)


def annotation(key: str, value: str) -> Mutation[Ingress]:
    """Set one metadata annotation, creating the mapping on first use."""
    return set_entry('metadata.annotations', key, value)


def label(key: str, value: str) -> Mutation[Ingress]:
    return set_entry('metadata.labels', key, value)


def spec(*mutations: Mutation[IngressSpec]) -> Mutation[Ingress]:
    """Build the spec from spec-level units and replace the current one.

    TLS entries added earlier by tlses() are discarded along with the old
    spec, so spec() goes first.
    """
    return nest('spec', *mutations)


# Readable aliases for spec(), named after what the call sites populate
rules = spec
spec_backends = spec


def tlses(*mutations: Mutation[IngressTLS]) -> Mutation[Ingress]:
    """Append one TLS entry per unit to spec.tls.

    Each unit is applied to its own fresh IngressTLS:

        >>> tlses(tls('a', 'foo'), tls('b', 'bar'))  # two entries
    """
    entries = [append('spec.tls', mutation) for mutation in mutations]

    def mutation(target: Ingress) -> None:
        for entry in entries:
            entry(target)

    return mutation


# ==================== Spec ====================

def rule(*mutations: Mutation[IngressRule]) -> Mutation[IngressSpec]:
    return append('rules', *mutations)


def spec_backend(*mutations: Mutation[IngressBackend]) -> Mutation[IngressSpec]:
    """Build the default backend from backend-level units."""
    return nest('default_backend', *mutations)


def ingress_class(value: str) -> Mutation[IngressSpec]:
    return assign('ingress_class_name', value)


def tls_entry(*mutations: Mutation[IngressTLS]) -> Mutation[IngressSpec]:
    """Append a single TLS entry built from all the given units."""
    return append('tls', *mutations)


# ==================== Rule ====================

def host(value: str) -> Mutation[IngressRule]:
    return assign('host', value)


def paths(*mutations: Mutation[HTTPIngressRuleValue]) -> Mutation[IngressRule]:
    return nest('http', *mutations)


# ==================== HTTP rule value ====================

def one_path(*mutations: Mutation[HTTPIngressPath]) -> Mutation[HTTPIngressRuleValue]:
    return append('paths', *mutations)


# ==================== Path ====================

def path(value: str) -> Mutation[HTTPIngressPath]:
    return assign('path', value)


def path_type(value: str) -> Mutation[HTTPIngressPath]:
    return assign('path_type', value)


def backend(service: str, port: ServiceBackendPort) -> Mutation[HTTPIngressPath]:
    """Route the path to a service port.

    Args:
        service: Service name.
        port: The port, by name (ServiceBackendPort(name='https')) or by
            number (ServiceBackendPort(number=80)).
    """
    return nest('backend', ingress_backend(service, port))


def path_backend(*mutations: Mutation[IngressBackend]) -> Mutation[HTTPIngressPath]:
    return nest('backend', *mutations)


# ==================== Backend ====================

def ingress_backend(service: str, port: ServiceBackendPort) -> Mutation[IngressBackend]:
    return nest(
        'service',
        assign('name', service),
        assign('port', port),
    )


def service_name(value: str) -> Mutation[IngressBackend]:
    return assign('service.name', value)


def port_number(value: int) -> Mutation[IngressBackend]:
    return assign('service.port.number', value)


def port_name(value: str) -> Mutation[IngressBackend]:
    return assign('service.port.name', value)


# ==================== TLS ====================

def tls(secret: str, *hosts: str) -> Mutation[IngressTLS]:
    """Set the secret and the full list of hosts it covers."""
    def mutation(target: IngressTLS) -> None:
        target.secret_name = secret
        target.hosts = list(hosts)

    return mutation


def secret_name(value: str) -> Mutation[IngressTLS]:
    return assign('secret_name', value)


def tls_host(value: str) -> Mutation[IngressTLS]:
    """Append one host to the TLS entry."""
    def mutation(target: IngressTLS) -> None:
        target.hosts.append(value)

    return mutation
