"""
Domain layer package.

Contains the request classification and override rules, entities,
and port interfaces. No framework imports, no IO.
"""
