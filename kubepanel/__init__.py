"""kubepanel - client-side resource provisioning and session state for a Kubernetes admin panel."""

__version__ = "0.1.0"
