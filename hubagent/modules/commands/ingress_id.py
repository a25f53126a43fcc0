from typing import Tuple


def parse_ingress_id(ingress_id: str) -> Tuple[str, str, bool]:
    """
    Extract the name and namespace from an ingress ID.

    Ingress IDs look like ``<name>@<namespace>.<kind>.<group>``, where the
    group may itself contain dots, e.g. ``whoami@default.ingress.networking.k8s.io``.

    Returns:
        Tuple of (name, namespace, ok). Name and namespace are empty when not ok.
    """
    parts = ingress_id.split(".")
    if len(parts) < 3:
        return "", "", False

    key_parts = parts[0].split("@")
    if len(key_parts) != 2:
        return "", "", False

    return key_parts[0], key_parts[1], True
