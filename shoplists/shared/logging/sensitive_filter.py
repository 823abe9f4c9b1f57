# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

SENSITIVE_PATTERNS = [
    # Bearer credentials and Authorization headers
    (r"(bearer\s+)([a-zA-Z0-9_\-\.]+)", r"\1***REDACTED***", re.IGNORECASE),
    (r"(authorization\s*[:=]\s*['\"]?)([^'\",}]{4,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),

    # Session tokens
    (r"(['\"]?token['\"]?\s*[:=]\s*['\"]?)([a-zA-Z0-9_\-\.]+)(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
    (r"(tok=)([a-zA-Z0-9_\-\.]+)", r"\1***REDACTED***"),

    # Passwords
    (r"(['\"]?password['\"]?\s*[:=]\s*['\"]?)([^'\",}\s]+)(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
    (r"(pwd\s*[:=]\s*['\"]?)([^'\",}\s]+)(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
]


def sanitize_message(message: str) -> str:
    sanitized = message

    for pattern_tuple in SENSITIVE_PATTERNS:
        if len(pattern_tuple) == 2:
            pattern, replacement = pattern_tuple
            flags = 0
        else:
            pattern, replacement, flags = pattern_tuple

        sanitized = re.sub(pattern, replacement, sanitized, flags=flags)

    return sanitized


def sanitize_record(record: dict[str, Any]) -> bool:
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True
