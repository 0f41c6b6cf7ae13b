# This file is part of jabberkit.
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
JID handling: lazy parsing of user@server/resource strings, validation,
case canonicalization and ordering
"""

from __future__ import annotations

from typing import Any
from typing import Optional
from typing import Union

import logging
import os

from jabberkit.exceptions import DomainpartEmpty
from jabberkit.exceptions import DomainpartNotAllowedChar
from jabberkit.exceptions import InvalidJid
from jabberkit.exceptions import LocalpartNotAllowedChar


log = logging.getLogger('jabberkit.jid')

_disallowed_chars = set('@/')


def strict_mode_enabled() -> bool:
    return os.environ.get('JABBERKIT_STRICT_JID') is not None


def _has_disallowed_chars(part: str) -> bool:
    return bool(_disallowed_chars & set(part))


def _cmp(left: str, right: str) -> int:
    return (left > right) - (left < right)


def build_jid(user: Optional[str],
              server: str,
              resource: Optional[str]) -> str:

    if server is None:
        raise TypeError('server must not be None')

    if user is not None:
        jid = f'{user}@{server}'
    else:
        jid = server

    if resource is not None:
        return f'{jid}/{resource}'
    return jid


def split_jid_string(
    jid_string: str
) -> tuple[Optional[str], str, Optional[str]]:
    """
    Split a JID string on the first '@' and the first '/'. An '@' that
    shows up after the first '/' belongs to the resource, in which case
    the JID has no user part.
    """

    at = jid_string.find('@')
    slash = jid_string.find('/')

    if at == -1:
        if slash == -1:
            return None, jid_string, None
        return None, jid_string[:slash], jid_string[slash + 1:]

    if slash == -1:
        return jid_string[:at], jid_string[at + 1:], None

    if at < slash:
        return jid_string[:at], jid_string[at + 1:slash], jid_string[slash + 1:]

    # '@' inside the resource, no user
    return None, jid_string[:slash], jid_string[slash + 1:]


def validate_parts(jid_string: str,
                   user: Optional[str],
                   server: Optional[str]) -> None:

    if user is not None and _has_disallowed_chars(user):
        raise LocalpartNotAllowedChar(jid_string)

    if not server:
        raise DomainpartEmpty(jid_string)

    if _has_disallowed_chars(server):
        raise DomainpartNotAllowedChar(jid_string)


class JID:
    """
    A JID of the form [user@]server[/resource]

    A JID created from a string keeps the string verbatim and parses it
    the first time a part is needed (part access, hashing, ordering or
    comparison with another JID). Parsing lowercases user and server and
    rebuilds the string form. A JID created from parts is considered
    parsed already and is neither validated nor lowercased.

    Setters do not validate the new value unless JABBERKIT_STRICT_JID is
    set in the environment.

    Instances are not thread-safe.
    """

    def __init__(self,
                 jid_string: Optional[str] = None,
                 *,
                 user: Optional[str] = None,
                 server: Optional[str] = None,
                 resource: Optional[str] = None) -> None:

        self._user: Optional[str] = None
        self._server: Optional[str] = None
        self._resource: Optional[str] = None

        if jid_string is not None:
            if not isinstance(jid_string, str):
                raise TypeError('JID string expected, got %s' %
                                type(jid_string).__name__)

            if user is not None or server is not None or resource is not None:
                raise TypeError('Pass either a JID string or its parts')

            self._jid = jid_string
            return

        jid = build_jid(user, server, resource)
        if strict_mode_enabled():
            validate_parts(jid, user, server)

        self._user = user
        self._server = server
        self._resource = resource
        self._jid = jid

    @classmethod
    def from_parts(cls,
                   user: Optional[str],
                   server: str,
                   resource: Optional[str] = None) -> JID:
        return cls(user=user, server=server, resource=resource)

    @classmethod
    def from_string(cls, jid_string: str) -> JID:
        """
        Like JID(jid_string) but parses right away, so a malformed string
        raises InvalidJid here instead of on first use
        """

        jid = cls(jid_string)
        jid._parse()
        return jid

    @property
    def is_parsed(self) -> bool:
        return self._server is not None

    def _parse(self) -> None:
        if self._server is not None:
            return

        user, server, resource = split_jid_string(self._jid)

        try:
            validate_parts(self._jid, user, server)
        except InvalidJid:
            log.debug('Unable to parse "%s"', self._jid)
            raise

        if user is not None:
            user = user.lower()
        server = server.lower()
        jid = build_jid(user, server, resource)

        self._user = user
        self._resource = resource
        self._jid = jid
        # _server marks the JID as parsed, so it goes last
        self._server = server

    def _set_parts(self,
                   user: Optional[str],
                   server: str,
                   resource: Optional[str]) -> None:

        jid = build_jid(user, server, resource)

        try:
            validate_parts(jid, user, server)
        except InvalidJid:
            if strict_mode_enabled():
                raise
            log.warning('Storing unchecked JID parts: "%s"', jid)

        self._user = user
        self._server = server
        self._resource = resource
        self._jid = jid

    @property
    def user(self) -> Optional[str]:
        self._parse()
        return self._user

    @user.setter
    def user(self, value: Optional[str]) -> None:
        self._parse()
        self._set_parts(value, self._server, self._resource)

    @property
    def server(self) -> str:
        self._parse()
        return self._server

    @server.setter
    def server(self, value: str) -> None:
        self._parse()
        self._set_parts(self._user, value, self._resource)

    @property
    def resource(self) -> Optional[str]:
        self._parse()
        return self._resource

    @resource.setter
    def resource(self, value: Optional[str]) -> None:
        self._parse()
        self._set_parts(self._user, self._server, value)

    @property
    def bare(self) -> str:
        self._parse()
        return build_jid(self._user, self._server, None)

    @property
    def is_bare(self) -> bool:
        return self.resource is None

    @property
    def is_full(self) -> bool:
        return self.resource is not None

    @property
    def is_domain(self) -> bool:
        return self.user is None and self.resource is None

    def new_as_bare(self) -> JID:
        return JID.from_parts(self.user, self.server)

    def new_with(self, **kwargs: Any) -> JID:
        parts = {
            'user': self.user,
            'server': self.server,
            'resource': self.resource,
        }
        parts.update(kwargs)
        return JID.from_parts(**parts)

    def bare_match(self, other: Union[str, JID]) -> bool:
        if isinstance(other, str):
            other = JID(other)
        return self.bare == other.bare

    def copy(self) -> JID:
        if not self.is_parsed:
            return JID(self._jid)
        return JID.from_parts(self._user, self._server, self._resource)

    def to_string(self) -> str:
        return self._jid

    def __str__(self) -> str:
        return self._jid

    def __repr__(self) -> str:
        return f'JID({self._jid!r})'

    def __hash__(self) -> int:
        self._parse()
        return hash(self._jid)

    def __eq__(self, other: object) -> bool:
        if other is None:
            return False

        if isinstance(other, str):
            # Compared against whatever string form is cached right now,
            # an unparsed JID still holds its input verbatim
            return self._jid == other

        if not isinstance(other, JID):
            return NotImplemented

        self._parse()
        other._parse()
        return self._jid == other._jid

    def compare_to(self, other: Optional[JID]) -> int:
        """
        Order by server, then user, then resource. Server and user compare
        case-insensitively, the resource case-sensitively. A missing user
        or resource sorts before a present one.
        """

        if other is None:
            return 1

        if other is self:
            return 0

        if not isinstance(other, JID):
            raise TypeError('Comparison of JID to non-JID')

        self._parse()
        other._parse()

        result = _cmp(self._server.lower(), other._server.lower())
        if result != 0:
            return result

        if self._user is None:
            if other._user is not None:
                return -1
        else:
            if other._user is None:
                return 1

            result = _cmp(self._user.lower(), other._user.lower())
            if result != 0:
                return result

        if self._resource is None:
            return 0 if other._resource is None else -1

        if other._resource is None:
            return 1

        return _cmp(self._resource, other._resource)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, JID):
            return NotImplemented
        return self.compare_to(other) == -1

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, JID):
            return NotImplemented
        return self.compare_to(other) == 1

    def __le__(self, other: object) -> bool:
        if not isinstance(other, JID):
            return NotImplemented
        return self.compare_to(other) != 1

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, JID):
            return NotImplemented
        return self.compare_to(other) != -1
