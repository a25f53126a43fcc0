"""
Kubernetes-backed stores.

The official client is blocking, so every API call is pushed to the
default executor to keep the watcher's event loop responsive.
"""

import asyncio
import functools
import logging
from typing import Any, Callable, Dict, Optional

from kubernetes import client, config
from kubernetes.client.rest import ApiException

from hubagent.exceptions import NotFoundError

from .interfaces import Ingress

logger = logging.getLogger(__name__)

ACP_GROUP = "hub.traefik.io"
ACP_VERSION = "v1alpha1"
ACP_PLURAL = "accesscontrolpolicies"

MERGE_PATCH_CONTENT_TYPE = "application/merge-patch+json"


def load_kube_config(kubeconfig: Optional[str] = None) -> None:
    """
    Load cluster credentials.

    An explicit kubeconfig path wins. Otherwise the in-cluster service
    account is used, falling back to the default kubeconfig location.
    """
    if kubeconfig:
        config.load_kube_config(config_file=kubeconfig)
        logger.info(f"Loaded Kubernetes config from {kubeconfig}")
        return

    try:
        config.load_incluster_config()
        logger.info("Loaded in-cluster Kubernetes config")
    except config.ConfigException:
        config.load_kube_config()
        logger.info("Loaded local Kubernetes config")


async def _run_blocking(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))


class KubernetesIngressStore:
    """Ingress store on top of the networking.k8s.io/v1 API."""

    def __init__(self, api: Optional[client.NetworkingV1Api] = None):
        self.api = api or client.NetworkingV1Api()

    async def get(self, name: str, namespace: str) -> Ingress:
        try:
            ingress = await _run_blocking(self.api.read_namespaced_ingress, name, namespace)
        except ApiException as e:
            if e.status == 404:
                raise NotFoundError(f"ingress {namespace}/{name} not found") from e
            raise

        metadata = ingress.metadata
        return Ingress(
            name=metadata.name,
            namespace=metadata.namespace,
            annotations=dict(metadata.annotations or {}),
        )

    async def apply_merge_patch(self, name: str, namespace: str, patch: Dict[str, Any]) -> None:
        await _run_blocking(
            self.api.patch_namespaced_ingress,
            name,
            namespace,
            patch,
            _content_type=MERGE_PATCH_CONTENT_TYPE,
        )


class KubernetesACPStore:
    """AccessControlPolicy lookups through the custom objects API."""

    def __init__(self, api: Optional[client.CustomObjectsApi] = None):
        self.api = api or client.CustomObjectsApi()

    async def exists(self, name: str) -> bool:
        try:
            await _run_blocking(
                self.api.get_cluster_custom_object,
                ACP_GROUP,
                ACP_VERSION,
                ACP_PLURAL,
                name,
            )
        except ApiException as e:
            if e.status == 404:
                return False
            raise

        return True
