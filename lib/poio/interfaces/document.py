# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Interfaces for the in-memory model of a PO/POT catalog."""

__all__ = [
    'ICatalogEntry',
    'ICountableEntry',
    'IDirectEntry',
    'IDocument',
    'IMetadata',
    ]

from zope.interface import (
    Attribute,
    Interface,
    )
from zope.schema import (
    Bool,
    Choice,
    List,
    Object,
    Text,
    TextLine,
    )

from poio.enums import (
    FileKind,
    SourceKind,
    )


class IMetadata(Interface):
    """The header pseudo-entry of a catalog as (name, value) pairs.

    Order is significant and names may repeat until the table has been
    normalized.
    """

    def get(name, default=None):
        """Return the value of the first field called `name`."""

    def set(name, value):
        """Replace the first `name` field's value, appending if absent.

        :return: True if the table changed.
        """

    def append(name, value):
        """Append a field without checking for an existing one."""

    def remove(name):
        """Remove every field called `name`.

        :return: The number of fields removed.
        """

    def removeDuplicates():
        """Keep the first occurrence of each field name.

        :return: The names of the dropped fields, in table order.
        """

    def names():
        """Return the field names in table order, duplicates included."""

    def items():
        """Return a list of (name, value) tuples in table order."""

    def copy():
        """Return an independent copy of this table."""

    def asText():
        """Return the table flattened to 'Name: Value\\n' lines.

        :raise UnrepresentableValue: If a name holds a colon or a newline,
            or a value holds a newline.
        """


class ICatalogEntry(Interface):
    """Attributes shared by every message entry."""

    msgid = Text(
        title=u'The untranslated singular message.', required=True)

    context = Text(
        title=u'The msgctxt disambiguating this message, or None.',
        required=False)

    is_obsolete = Bool(
        title=u'Whether the entry was marked with #~.', required=True)

    translator_comments = List(
        title=u"Text of '#' comment lines, marker characters after '#' "
              u"kept verbatim.",
        value_type=Text(), required=True)

    source_reference_comments = List(
        title=u"filename:line references from '#:' lines.",
        value_type=TextLine(), required=True)

    flags_comments = List(
        title=u"Flags from '#,' lines, such as fuzzy or c-format.",
        value_type=TextLine(), required=True)

    previous_string_comments = List(
        title=u"Content of '#|' lines.",
        value_type=Text(), required=True)

    is_fuzzy = Bool(
        title=u'Whether the fuzzy flag is set.', readonly=True)

    def clearTranslations():
        """Reset the translation(s) of this entry to empty strings."""

    def copy():
        """Return an independent copy of this entry."""


class IDirectEntry(ICatalogEntry):
    """A message with a single translation."""

    msgstr = Text(title=u'The translation; empty in templates.')


class ICountableEntry(ICatalogEntry):
    """A message whose translation depends on a quantity."""

    msgid_plural = Text(
        title=u'The untranslated plural message.', required=True)

    msgstr = List(
        title=u'Translations indexed by plural form.',
        value_type=Text(), required=True)


class IDocument(Interface):
    """A whole PO or POT catalog."""

    file_kind = Choice(
        title=u'Whether this is a PO or a POT catalog.',
        vocabulary=FileKind, required=True)

    source_kind = Choice(
        title=u'Which layer generated the messages.',
        vocabulary=SourceKind, required=True)

    leading_comments = List(
        title=u'Comment lines preceding the header entry, verbatim.',
        value_type=Text(), required=True)

    header = Object(
        title=u'The header metadata table.', schema=IMetadata,
        required=True)

    entries = Attribute(
        "Every message entry, direct and countable, in document order.")

    direct_entries = Attribute(
        "The IDirectEntry entries, in document order.")

    countable_entries = Attribute(
        "The ICountableEntry entries, in document order.")

    syntax_warnings = List(
        title=u'Warnings produced while parsing.',
        value_type=Text(), required=True)

    def append(entry):
        """Append a message entry."""

    def copy():
        """Return an independent deep copy of this document."""
