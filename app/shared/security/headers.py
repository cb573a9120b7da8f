"""
Secure HTTP headers.

Applied by the response mapper to every outgoing response, including
mapped error envelopes. No business logic. Pure cross-cutting concern.
"""

from starlette.responses import Response

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
}


def apply_secure_headers(response: Response) -> Response:
    """Set the secure header defaults on a response, in place."""
    for header_name, header_value in SECURE_HEADERS.items():
        response.headers.setdefault(header_name, header_value)
    return response
