# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .guards import BEARER_SCHEME, AccessGuard, extract_bearer_token

__all__ = ["AccessGuard", "BEARER_SCHEME", "extract_bearer_token"]
