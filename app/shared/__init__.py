"""
Shared module package.

Cross-cutting concerns every request passes through:
- Error mapping and the response mapper (single exit funnel)
- Request context resolution from the session cookie
- Secure headers and rate limiting
- Logging configuration
"""
