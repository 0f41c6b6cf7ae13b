# This file is part of jabberkit.
#
# SPDX-License-Identifier: GPL-3.0-or-later


class InvalidJid(Exception):
    """
    An attempt was made to parse a badly-formatted JID
    """

    def __init__(self, jid: str) -> None:
        Exception.__init__(self, jid)
        self.jid = jid

    def __str__(self) -> str:
        return 'Bad JID: (%s)' % self.jid


class LocalpartNotAllowedChar(InvalidJid):
    pass


class DomainpartEmpty(InvalidJid):
    pass


class DomainpartNotAllowedChar(InvalidJid):
    pass
