"""
Custom error pages backend for an ingress controller.

Application package root. The ingress proxy calls this service when an
upstream answers with an error status; the service picks the error page
matching the requested format and status code and streams it back.

Layers:
    - domain: Classifier, override resolver, entities, ports (ABCs), errors.
    - application: Use cases and DTOs.
    - infrastructure: Filesystem, process environment and Prometheus adapters.
    - interfaces: FastAPI routers and dependency wiring.
    - shared: Cross-cutting concerns (errors, logging).
"""
