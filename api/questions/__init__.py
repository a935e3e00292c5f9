"""
Questions feature: store, schemas and HTTP routes.
"""
