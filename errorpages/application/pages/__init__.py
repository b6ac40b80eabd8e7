"""
Application layer for the error pages bounded context.

Use cases coordinate the classifier, the override resolver and the
page store. No framework or infrastructure imports allowed.
"""
