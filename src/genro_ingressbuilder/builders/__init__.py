# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Builders for routing resources - per-level mutation unit vocabularies."""

from . import ingress

__all__ = [
    'ingress',
]
