# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Authentication core.

This package provides:
- Password hashing/verification (argon2)
- In-memory credential store
- Registration/login orchestration with uniform failure messages
"""
