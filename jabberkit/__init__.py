"""
Jabber identifiers (JIDs) and a few XMPP element wrappers.

A JID has the form [user@]server[/resource]. JID objects parse lazily,
compare user and server case-insensitively and the resource
case-sensitively, and sort by server first.
"""

from jabberkit.exceptions import InvalidJid
from jabberkit.jid import JID

__all__ = ['JID', 'InvalidJid']

__version__ = "0.1.0"
