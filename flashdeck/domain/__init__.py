"""
Domain layer.

Pure Python entities and value objects with no framework dependencies.
"""
