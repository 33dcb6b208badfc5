"""
Interfaces layer package.

Contains FastAPI routers, Pydantic response schemas and the
dependency that runs the validation pipeline before dispatch.
No business logic belongs here. Routes call use cases and return responses.
"""
