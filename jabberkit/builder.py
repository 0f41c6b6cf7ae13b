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

from typing import Optional
from typing import Union
from typing import cast

from lxml import etree

from jabberkit.const import EventType
from jabberkit.elements import Base
from jabberkit.elements import MessageEvent as _MessageEvent
from jabberkit.elements import StreamError as _StreamError
from jabberkit.elements import create_nsmap_and_tag
from jabberkit.lookups import ElementLookup


PARSER_SETTINGS = {
    'no_network': True,
    'recover': False,
    'resolve_entities': False,
    'remove_comments': True,
    'remove_pis': True,
}

_element_parser = etree.XMLParser(**PARSER_SETTINGS)
_element_parser.set_element_class_lookup(ElementLookup)


def E(tag: str,
      text: Optional[str] = None,
      namespace: Optional[str] = None,
      **attrib: str) -> Base:

    tag, nsmap = create_nsmap_and_tag(tag, namespace)

    element = cast(Base, _element_parser.makeelement(tag,
                                                     nsmap=nsmap,
                                                     attrib=attrib))
    if text is not None:
        element.text = text
    return element


def parse_element(data: Union[str, bytes]) -> Base:
    return cast(Base, etree.fromstring(data, _element_parser))


def StreamError(message: Optional[str] = None) -> _StreamError:
    error = cast(_StreamError, E(_StreamError.TAG,
                                 namespace=_StreamError.NAMESPACE))
    if message is not None:
        error.message = message
    return error


def MessageEvent(id: Optional[str] = None,
                 type: EventType = EventType.NONE) -> _MessageEvent:

    event = cast(_MessageEvent, E(_MessageEvent.TAG,
                                  namespace=_MessageEvent.NAMESPACE))
    if id is not None:
        event.id = id
    event.type = type
    return event
