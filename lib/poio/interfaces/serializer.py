# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Interfaces and exceptions for writing PO files."""

__all__ = [
    'IPOSerializer',
    'SerializeError',
    'UnrepresentableValue',
    ]

from zope.interface import Interface
from zope.schema import Int

from poio.interfaces.parser import POFormatError


class SerializeError(POFormatError):
    """A document could not be rendered as PO text."""


class UnrepresentableValue(SerializeError):
    default_message = 'Value cannot be represented in a PO string'


class IPOSerializer(Interface):
    """Renders an `IDocument` back to PO/POT text."""

    wrap_width = Int(
        title=u'Column at which long strings are wrapped, or None for one '
              u'physical line per string.',
        required=False)

    def serialize(document):
        """Return the text form of `document`.

        :raise UnrepresentableValue: If a string holds a NUL character or
            an unpaired surrogate.
        """
