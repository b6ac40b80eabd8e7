"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports defined in
the domain layer: the error files directory, the process environment
and the Prometheus registry.
"""
