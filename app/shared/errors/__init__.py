"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that subway domain errors
are consistently translated into API responses.
"""
