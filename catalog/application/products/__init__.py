"""
Application layer for the products bounded context.

One use case per catalog operation: list, get, create, update,
toggle availability and delete. No framework or infrastructure imports.
"""
