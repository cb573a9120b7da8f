"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas,
dependency wiring and the authorization gate. No business logic
belongs here. Routes call use cases and return responses.
"""
