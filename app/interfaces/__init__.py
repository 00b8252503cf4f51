"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas,
and input validation. Routes call use cases and return responses.
"""
