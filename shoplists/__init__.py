# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""In-memory shopping list server with bearer-session access control."""

__version__ = "0.1.0"
