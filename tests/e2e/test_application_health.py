"""End-to-end checks against a deployed service.

Deselected by default; run with `pytest -m e2e` and point `APP_URL` at the
service (defaults to the in-cluster service address).
"""

import logging

import pytest

from demo_service.bootstrap import bootstrap_create_health_verifier
from demo_service.verifier import HttpxHealthCheckTransport

logger = logging.getLogger(__name__)

pytestmark = pytest.mark.e2e


def test_cluster_credentials_are_discoverable() -> None:
    """Load cluster credentials and reach the API server within the request timeout."""

    from demo_service.verifier.cluster import verifier_create_cluster_client

    cluster_client = verifier_create_cluster_client()
    api_resources = cluster_client.core_api.get_api_resources(**cluster_client.cluster_request_options())

    logger.info("Loaded cluster credentials from %s", cluster_client.source)
    assert cluster_client.source
    assert api_resources.group_version == "v1"


def test_application_health() -> None:
    """Poll the deployed health endpoint until it answers HTTP 200."""

    with HttpxHealthCheckTransport() as transport:
        result = bootstrap_create_health_verifier(transport=transport).verifier_run()

    if not result.passed:
        pytest.fail(f"{result.error_detail} (attempts={result.attempts}, target={result.target_url})")
    logger.info("Health check passed on attempt %d", result.attempts)
