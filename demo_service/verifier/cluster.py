"""Kubernetes client discovery for end-to-end runs.

In-cluster service-account credentials are tried first; outside a cluster the
kubeconfig named by `KUBECONFIG` is used, else `$HOME/.kube/config`.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from kubernetes import client as kubernetes_client
from kubernetes import config as kubernetes_config
from kubernetes.config.config_exception import ConfigException

from demo_service.config import config_resolve_value

from .errors import VerifierClusterConfigError

logger = logging.getLogger(__name__)

CLUSTER_REQUEST_TIMEOUT_SECONDS = 60.0


@dataclass(frozen=True)
class ClusterClient:
    """Loaded cluster client handle.

    The kubernetes client has no client-wide timeout, so every API call must
    take its timeout from `cluster_request_options()`.

    Attributes:
        core_api: Core v1 API bound to the loaded credentials.
        source: `in-cluster` or the kubeconfig path that was used.
        request_timeout_seconds: Per-call timeout applied through `cluster_request_options`.
    """

    core_api: kubernetes_client.CoreV1Api
    source: str
    request_timeout_seconds: float = CLUSTER_REQUEST_TIMEOUT_SECONDS

    def cluster_request_options(self) -> dict[str, float]:
        """Return keyword options to splat into every `core_api` call.

        Returns:
            dict[str, float]: `_request_timeout` set to the configured timeout.
        """

        return {"_request_timeout": self.request_timeout_seconds}


def verifier_resolve_kubeconfig_path(environ: Mapping[str, str] | None = None) -> str:
    """Return the kubeconfig path used when in-cluster configuration is unavailable.

    Args:
        environ: Optional environment mapping; defaults to the process environment.

    Returns:
        str: `KUBECONFIG` when set and non-empty, else `$HOME/.kube/config`.
    """

    home_directory = config_resolve_value("HOME", "", environ=environ)
    default_path = os.path.join(home_directory, ".kube", "config")
    return config_resolve_value("KUBECONFIG", default_path, environ=environ)


def verifier_create_cluster_client(environ: Mapping[str, str] | None = None) -> ClusterClient:
    """Load cluster credentials and build a core API client.

    Args:
        environ: Optional environment mapping used for kubeconfig path resolution.

    Returns:
        ClusterClient: Client handle with its credential source.

    Raises:
        VerifierClusterConfigError: Raised when no credentials can be loaded.
    """

    try:
        kubernetes_config.load_incluster_config()
        source = "in-cluster"
    except ConfigException as in_cluster_error:
        logger.info("Failed to get in-cluster config: %s", in_cluster_error)
        kubeconfig_path = verifier_resolve_kubeconfig_path(environ=environ)
        try:
            kubernetes_config.load_kube_config(config_file=kubeconfig_path)
        except (ConfigException, OSError) as kubeconfig_error:
            raise VerifierClusterConfigError(
                f"Failed to create kubernetes config from {kubeconfig_path}: {kubeconfig_error}"
            ) from kubeconfig_error
        source = kubeconfig_path

    return ClusterClient(core_api=kubernetes_client.CoreV1Api(), source=source)
