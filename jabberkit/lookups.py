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

from typing import Any

from lxml import etree

from jabberkit.elements import Base
from jabberkit.elements import MessageEvent
from jabberkit.elements import StreamError


def register_class_lookup(tag: str,
                          namespace: str,
                          element_class: Any) -> None:

    _NamespaceLookup.get_namespace(namespace)[tag] = element_class


# Fallback order is important
_BaseLookup = etree.ElementDefaultClassLookup(element=Base)
_NamespaceLookup = etree.ElementNamespaceClassLookup(fallback=_BaseLookup)

ElementLookup = _NamespaceLookup


for _element_class in (StreamError, MessageEvent):
    register_class_lookup(_element_class.TAG,
                          _element_class.NAMESPACE,
                          _element_class)
