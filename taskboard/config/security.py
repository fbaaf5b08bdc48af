# taskboard/config/security.py
# Security configuration for HTTP responses

from typing import Dict


class SecurityConfig:
    """Security configuration for the application"""

    # Security headers added to every response
    SECURITY_HEADERS = {
        'X-Content-Type-Options': 'nosniff',
        'X-Frame-Options': 'DENY',
        'X-XSS-Protection': '0',
        'Strict-Transport-Security': 'max-age=15552000; includeSubDomains',
        'Referrer-Policy': 'no-referrer',
        'Cross-Origin-Opener-Policy': 'same-origin',
        'Cross-Origin-Resource-Policy': 'same-origin',
        'Content-Security-Policy': "default-src 'self'; frame-ancestors 'none'",
    }

    @classmethod
    def get_security_headers(cls) -> Dict[str, str]:
        """Get a copy of the response security headers"""
        return dict(cls.SECURITY_HEADERS)
