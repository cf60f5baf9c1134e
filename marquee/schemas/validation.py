"""
Free-text sanitizing shared by review comments and the admin movie form.

Comments and synopses are shown as rich text, so a small set of inline
formatting tags survives; anything script-like is rejected outright.
"""

import re
from typing import Optional

import bleach

# Inline formatting kept in comments and synopses
ALLOWED_TAGS = ['b', 'i', 'u', 'em', 'strong', 'p', 'br']

_SCRIPT_PATTERNS = [
    re.compile(r'<script[^>]*>', re.IGNORECASE),
    re.compile(r'javascript:', re.IGNORECASE),
    re.compile(r'on\w+\s*=', re.IGNORECASE),
    re.compile(r'<iframe', re.IGNORECASE),
]


class SafeStringMixin:
    """Validators for pydantic models that accept user-written text"""

    @staticmethod
    def sanitize_html(value: Optional[str]) -> Optional[str]:
        """Strip every tag outside ALLOWED_TAGS"""
        if not value:
            return value
        return bleach.clean(value, tags=ALLOWED_TAGS, strip=True)

    @staticmethod
    def validate_no_script(value: Optional[str]) -> Optional[str]:
        if not value:
            return value
        if any(pattern.search(value) for pattern in _SCRIPT_PATTERNS):
            raise ValueError("Invalid characters detected")
        return value

    @classmethod
    def clean_text(cls, value: Optional[str]) -> Optional[str]:
        """Reject script-like input, then strip disallowed markup"""
        return cls.sanitize_html(cls.validate_no_script(value))
