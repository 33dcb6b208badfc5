"""
Shared module package.

Contains cross-cutting concerns:
- Error normalization
- Security middleware (headers, origin policy, rate limiting)
- Logging configuration
"""
