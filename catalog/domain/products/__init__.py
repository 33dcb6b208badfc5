"""
Products bounded context: domain layer.

- Product entity and draft
- Request validation pipeline and rule catalog
- Record store port
- Domain errors
"""
