# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures: the fully spelled-out golden Ingress."""

import pytest

from genro_ingressbuilder import (
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


def sample_ingress():
    """Return a new golden Ingress, written as a plain nested literal."""
    return Ingress(
        metadata=ObjectMeta(
            namespace='testing',
        ),
        spec=IngressSpec(
            ingress_class_name=None,
            default_backend=None,
            tls=[
                IngressTLS(
                    hosts=['foo'],
                    secret_name='tls-secret',
                ),
            ],
            rules=[
                IngressRule(
                    host='foo',
                    http=HTTPIngressRuleValue(
                        paths=[
                            HTTPIngressPath(
                                path='/bar',
                                backend=IngressBackend(
                                    service=IngressServiceBackend(
                                        name='service1',
                                        port=ServiceBackendPort(number=80),
                                    ),
                                ),
                            ),
                            HTTPIngressPath(
                                path='/namedthing',
                                backend=IngressBackend(
                                    service=IngressServiceBackend(
                                        name='service4',
                                        port=ServiceBackendPort(name='https'),
                                    ),
                                ),
                            ),
                        ],
                    ),
                ),
                IngressRule(
                    host='bar',
                    http=HTTPIngressRuleValue(
                        paths=[
                            HTTPIngressPath(
                                backend=IngressBackend(
                                    service=IngressServiceBackend(
                                        name='service3',
                                        port=ServiceBackendPort(name='https'),
                                    ),
                                ),
                            ),
                            HTTPIngressPath(
                                backend=IngressBackend(
                                    service=IngressServiceBackend(
                                        name='service2',
                                        port=ServiceBackendPort(number=802),
                                    ),
                                ),
                            ),
                        ],
                    ),
                ),
            ],
        ),
    )


@pytest.fixture
def expected_ingress():
    """A fresh golden Ingress per test."""
    return sample_ingress()
