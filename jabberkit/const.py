# This file is part of jabberkit.
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from enum import IntFlag


class EventType(IntFlag):
    NONE = 0
    OFFLINE = 1
    DELIVERED = 2
    DISPLAYED = 4
    COMPOSING = 8

    @property
    def is_offline(self) -> bool:
        return bool(self & EventType.OFFLINE)

    @property
    def is_delivered(self) -> bool:
        return bool(self & EventType.DELIVERED)

    @property
    def is_displayed(self) -> bool:
        return bool(self & EventType.DISPLAYED)

    @property
    def is_composing(self) -> bool:
        return bool(self & EventType.COMPOSING)
