# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .credentials import InMemoryCredentialStore
from .lists import InMemoryListRepository
from .sessions import InMemorySessionRegistry

__all__ = ["InMemoryCredentialStore", "InMemoryListRepository", "InMemorySessionRegistry"]
