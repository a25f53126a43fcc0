"""
Kube Module - Black Box Interface

Purpose: Read and patch cluster objects on behalf of the command handlers
Interface: IngressStore.get(), IngressStore.apply_merge_patch(), ACPStore.exists()
Hidden: Kubernetes client, API groups, threading of blocking calls

Can be replaced with any store speaking merge-patch semantics.
"""

from .interfaces import ACPStore, Ingress, IngressStore
from .stores import KubernetesACPStore, KubernetesIngressStore, load_kube_config

__all__ = [
    "ACPStore",
    "Ingress",
    "IngressStore",
    "KubernetesACPStore",
    "KubernetesIngressStore",
    "load_kube_config",
]
