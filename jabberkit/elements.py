# This file is part of jabberkit.
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 3
# of the License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; If not, see <http://www.gnu.org/licenses/>.

from __future__ import annotations

from typing import Iterator
from typing import Optional

import logging

from lxml import etree

from jabberkit.const import EventType
from jabberkit.namespaces import Namespace


log = logging.getLogger('jabberkit.elements')

NSMap = dict[Optional[str], str]


def create_nsmap_and_tag(tag: str,
                         namespace: Optional[str]) -> tuple[str, Optional[NSMap]]:
    nsmap: Optional[NSMap] = None
    if namespace is not None:
        nsmap = {None: namespace}
        tag = '{%s}%s' % (namespace, tag)
    return tag, nsmap


class Base(etree.ElementBase):

    def find_tag(self,
                 tag: str,
                 namespace: Optional[str] = None) -> Optional[Base]:

        if namespace is None:
            namespace = etree.QName(self).namespace
        tag, _nsmap = create_nsmap_and_tag(tag, namespace)
        return self.find(tag)

    def find_tag_text(self,
                      tag: str,
                      namespace: Optional[str] = None) -> Optional[str]:

        element = self.find_tag(tag, namespace=namespace)
        if element is None:
            return None
        return element.text

    def has_tag(self,
                tag: str,
                namespace: Optional[str] = None) -> bool:

        return self.find_tag(tag, namespace=namespace) is not None

    def add_tag(self,
                tag: str,
                namespace: Optional[str] = None,
                **attrib: str) -> Base:

        if namespace is None:
            namespace = etree.QName(self).namespace

        tag, nsmap = create_nsmap_and_tag(tag, namespace)
        return etree.SubElement(self, tag, nsmap=nsmap, attrib=attrib)

    def add_tag_text(self,
                     tag: str,
                     text: str,
                     namespace: Optional[str] = None) -> Base:

        element = self.find_tag(tag, namespace=namespace)
        if element is None:
            element = self.add_tag(tag, namespace=namespace)
        element.text = text
        return element

    def set_tag_text(self,
                     tag: str,
                     text: Optional[str],
                     namespace: Optional[str] = None) -> None:

        if text is None:
            self.remove_tags(tag, namespace=namespace)
            return
        self.add_tag_text(tag, text, namespace=namespace)

    def find_tags(self,
                  tag: str,
                  namespace: Optional[str] = None) -> list[Base]:
        return list(self.iter_tags(tag, namespace=namespace))

    def iter_tags(self,
                  tag: str,
                  namespace: Optional[str] = None) -> Iterator[Base]:
        if namespace is None:
            namespace = etree.QName(self).namespace
        tag, _nsmap = create_nsmap_and_tag(tag, namespace)
        return self.iterchildren(tag)

    def remove_tag(self,
                   tag: str,
                   namespace: Optional[str] = None) -> Optional[Base]:
        element = self.find_tag(tag, namespace=namespace)
        if element is None:
            return None
        self.remove(element)
        return element

    def remove_tags(self,
                    tag: str,
                    namespace: Optional[str] = None) -> None:
        for element in self.find_tags(tag, namespace=namespace):
            self.remove(element)

    def get_children(self) -> list[Base]:
        return [child for child in self if isinstance(child.tag, str)]

    @property
    def localname(self) -> str:
        return etree.QName(self).localname

    @property
    def namespace(self) -> Optional[str]:
        return etree.QName(self).namespace

    def tostring(self, pretty_print: bool = False) -> str:
        return etree.tostring(self, pretty_print=pretty_print, encoding=str)

    def __str__(self) -> str:
        return self.tostring()

    def __repr__(self) -> str:
        repr_str = super().__repr__()
        return repr_str.replace('<Element', f'<{self.__class__.__name__}')


class StreamError(Base):
    TAG = 'error'
    NAMESPACE = Namespace.STREAMS

    @property
    def message(self) -> str:
        return ''.join(self.itertext())

    @message.setter
    def message(self, value: Optional[str]) -> None:
        for child in list(self):
            self.remove(child)
        self.text = value

    @property
    def condition(self) -> Optional[str]:
        for child in self.get_children():
            qname = etree.QName(child)
            if (qname.namespace == Namespace.XMPP_STREAMS and
                    qname.localname != 'text'):
                return qname.localname
        return None


def _event_flag(tag: str) -> property:

    def getter(self: MessageEvent) -> bool:
        return self.has_tag(tag)

    def setter(self: MessageEvent, value: bool) -> None:
        if not value:
            self.remove_tags(tag)
        elif not self.has_tag(tag):
            self.add_tag(tag)

    return property(getter, setter)


class MessageEvent(Base):
    '''
    XEP-0022 message event
    '''

    TAG = 'x'
    NAMESPACE = Namespace.XEVENT

    offline = _event_flag('offline')
    delivered = _event_flag('delivered')
    displayed = _event_flag('displayed')
    composing = _event_flag('composing')

    @property
    def id(self) -> Optional[str]:
        return self.find_tag_text('id')

    @id.setter
    def id(self, value: Optional[str]) -> None:
        self.set_tag_text('id', value)

    @property
    def type(self) -> EventType:
        event_type = EventType.NONE
        if self.offline:
            event_type |= EventType.OFFLINE
        if self.delivered:
            event_type |= EventType.DELIVERED
        if self.displayed:
            event_type |= EventType.DISPLAYED
        if self.composing:
            event_type |= EventType.COMPOSING
        return event_type

    @type.setter
    def type(self, value: EventType) -> None:
        value = EventType(value)
        log.debug('Set message event type: %s', value)
        self.offline = value.is_offline
        self.delivered = value.is_delivered
        self.displayed = value.is_displayed
        self.composing = value.is_composing
