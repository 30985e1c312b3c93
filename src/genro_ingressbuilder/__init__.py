# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-IngressBuilder - Composable builders for nested routing resources.

A lightweight, zero-dependency library for assembling expected values in
equality-based tests. Each nesting level owns a small vocabulary of
mutation units; nesting is expressed by passing child units to a parent unit.
"""

__version__ = "0.1.0"

from .builders import ingress
from .mutation import Mutation, append, assign, build, nest, set_entry
from .resources import (
    HTTPIngressPath,
    HTTPIngressRuleValue,
    Ingress,
    IngressBackend,
    IngressRule,
    IngressServiceBackend,
    IngressSpec,
    IngressTLS,
    ObjectMeta,
    ServiceBackendPort,
)

__all__ = [
    # Engine
    "Mutation",
    "build",
    "assign",
    "nest",
    "append",
    "set_entry",
    # Vocabulary
    "ingress",
    # Resources
    "Ingress",
    "ObjectMeta",
    "IngressSpec",
    "IngressRule",
    "HTTPIngressRuleValue",
    "HTTPIngressPath",
    "IngressBackend",
    "IngressServiceBackend",
    "ServiceBackendPort",
    "IngressTLS",
]
