"""
Hub Agent - Kubernetes command agent

Applies access-control policy commands issued by the Hub platform to the
Ingress resources of the cluster it runs in.

Architecture:
- Each module is self-contained with clear interfaces
- Cluster and platform access are injected, never imported directly
- The agent keeps no command state between polling cycles

Modules:
- api: Wire models exchanged with the platform
- commands: Command watcher, router and handlers
- kube: Ingress and AccessControlPolicy stores
- platform: Platform HTTP client
"""

__version__ = "1.0.0"
