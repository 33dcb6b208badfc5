"""
Product catalog REST API.

A FastAPI service exposing CRUD operations over a single product
table, with explicit request validation, normalized error responses
and a single-origin CORS policy.
"""
