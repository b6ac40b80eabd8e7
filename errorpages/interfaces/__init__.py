"""
Interfaces layer package.

Contains FastAPI routers and dependency wiring.
No business logic belongs here. Routes call use cases and return responses.
"""
