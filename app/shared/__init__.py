"""
Shared module package.

Contains cross-cutting concerns used by the subway context:
- Error handling and mapping
- Security middleware
- Rate limiting
- Logging configuration
"""
