"""sidecar-bridge: run development tools inside sidecar containers.

Commands named in a YAML policy file are routed either to a native binary
on the host or into a container via ``docker exec``, with host paths in
arguments and in the working directory rewritten to the container's view.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
