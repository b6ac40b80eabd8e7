"""
Error pages bounded context: domain layer.

- Request classification (format, extension, status code)
- Maintenance overrides for the refresh service
- Page and metrics ports
"""
