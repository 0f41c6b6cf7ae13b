# This file is part of jabberkit.
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class _Namespaces:
    STREAMS: str = 'http://etherx.jabber.org/streams'
    XEVENT: str = 'jabber:x:event'
    XMPP_STREAMS: str = 'urn:ietf:params:xml:ns:xmpp-streams'


Namespace = _Namespaces()
