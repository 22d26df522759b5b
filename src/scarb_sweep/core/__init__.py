# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core helpers shared across scarb-sweep (logging, process execution)."""
