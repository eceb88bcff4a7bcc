# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""In-memory model of a PO/POT catalog.

A `Document` owns its header `Metadata` and every message entry.  Entries
never reference each other or the document, so copying a document is a
matter of copying its parts.
"""

__all__ = [
    'CatalogEntry',
    'CountableEntry',
    'DirectEntry',
    'Document',
    'Metadata',
    'parse_assignments',
    ]

import copy
import logging

from zope.interface import implementer

from poio.enums import (
    FileKind,
    SourceKind,
    )
from poio.interfaces import (
    ICountableEntry,
    IDirectEntry,
    IDocument,
    IMetadata,
    UnrepresentableValue,
    )


@implementer(IMetadata)
class Metadata:
    """See `IMetadata`."""

    def __init__(self, items=None):
        self._items = []
        if items is not None:
            for name, value in items:
                self.append(name, value)

    @classmethod
    def fromText(cls, text, warnings=None):
        """Build a table from a header msgstr.

        Lines are 'Name: Value' pairs split on the first colon.  Lines
        without a colon are skipped, and reported in `warnings` if given.

        >>> Metadata.fromText('MIME-Version: 1.0\\nLanguage: de\\n').items()
        [('MIME-Version', '1.0'), ('Language', 'de')]
        """
        metadata = cls()
        for line in text.split('\n'):
            line = line.strip()
            if not line:
                continue
            try:
                name, value = line.split(':', 1)
            except ValueError:
                message = 'PO file header entry has a bad entry: %s' % line
                logging.info(message)
                if warnings is not None:
                    warnings.append(message)
                continue
            metadata.append(name.strip(), value.strip())
        return metadata

    def asText(self):
        """See `IMetadata`."""
        for name, value in self._items:
            if u':' in name or u'\n' in name or u'\n' in value:
                raise UnrepresentableValue(
                    "Cannot represent header field %r: %r" % (name, value))
        return u''.join(
            u'%s: %s\n' % (name, value) for name, value in self._items)

    def get(self, name, default=None):
        """See `IMetadata`."""
        for field, value in self._items:
            if field == name:
                return value
        return default

    def set(self, name, value):
        """See `IMetadata`."""
        for position, (field, old_value) in enumerate(self._items):
            if field == name:
                if old_value == value:
                    return False
                self._items[position] = (name, value)
                return True
        self._items.append((name, value))
        return True

    def append(self, name, value):
        """See `IMetadata`."""
        self._items.append((name, value))

    def remove(self, name):
        """See `IMetadata`."""
        kept = [item for item in self._items if item[0] != name]
        removed = len(self._items) - len(kept)
        self._items = kept
        return removed

    def removeDuplicates(self):
        """See `IMetadata`."""
        seen = set()
        kept = []
        dropped = []
        for name, value in self._items:
            if name in seen:
                dropped.append(name)
                continue
            seen.add(name)
            kept.append((name, value))
        self._items = kept
        return dropped

    def names(self):
        """See `IMetadata`."""
        return [name for name, value in self._items]

    def items(self):
        """See `IMetadata`."""
        return list(self._items)

    def copy(self):
        """See `IMetadata`."""
        return Metadata(self._items)

    def __contains__(self, name):
        return name in self.names()

    def __iter__(self):
        return iter(self.items())

    def __len__(self):
        return len(self._items)

    def __eq__(self, other):
        if not isinstance(other, Metadata):
            return NotImplemented
        return self._items == other._items

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __repr__(self):
        return '<Metadata %r>' % (self._items,)


class CatalogEntry:
    """Comments and identity shared by direct and countable entries."""

    def __init__(self, msgid, context=None, is_obsolete=False,
                 translator_comments=None, source_reference_comments=None,
                 flags_comments=None, previous_string_comments=None):
        self.msgid = msgid
        self.context = context
        self.is_obsolete = is_obsolete
        self.translator_comments = list(translator_comments or [])
        self.source_reference_comments = list(
            source_reference_comments or [])
        self.flags_comments = list(flags_comments or [])
        self.previous_string_comments = list(previous_string_comments or [])

    @property
    def is_fuzzy(self):
        return 'fuzzy' in self.flags_comments

    @property
    def key(self):
        """The (context, msgid) pair that identifies this message."""
        return (self.context, self.msgid)

    def copy(self):
        return copy.deepcopy(self)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __repr__(self):
        return '<%s %r>' % (self.__class__.__name__, self.msgid)


@implementer(IDirectEntry)
class DirectEntry(CatalogEntry):
    """See `IDirectEntry`."""

    def __init__(self, msgid, msgstr=u'', **kw):
        CatalogEntry.__init__(self, msgid, **kw)
        self.msgstr = msgstr

    def clearTranslations(self):
        """See `ICatalogEntry`."""
        self.msgstr = u''


@implementer(ICountableEntry)
class CountableEntry(CatalogEntry):
    """See `ICountableEntry`."""

    def __init__(self, msgid, msgid_plural, msgstr=None, **kw):
        CatalogEntry.__init__(self, msgid, **kw)
        self.msgid_plural = msgid_plural
        self.msgstr = list(msgstr or [])

    def clearTranslations(self, number_plural_forms=None):
        """See `ICatalogEntry`.

        :param number_plural_forms: How many empty forms to keep.  The
            current number of forms is kept when None.
        """
        if number_plural_forms is None:
            number_plural_forms = len(self.msgstr)
        self.msgstr = [u''] * number_plural_forms


@implementer(IDocument)
class Document:
    """See `IDocument`."""

    def __init__(self, file_kind=FileKind.PO, source_kind=SourceKind.R,
                 leading_comments=None, header=None, entries=None):
        self.file_kind = file_kind
        self.source_kind = source_kind
        self.leading_comments = list(leading_comments or [])
        if header is None:
            header = Metadata()
        self.header = header
        self._entries = []
        self.syntax_warnings = []
        for entry in entries or []:
            self.append(entry)

    @property
    def entries(self):
        return list(self._entries)

    @property
    def direct_entries(self):
        return [entry for entry in self._entries
                if IDirectEntry.providedBy(entry)]

    @property
    def countable_entries(self):
        return [entry for entry in self._entries
                if ICountableEntry.providedBy(entry)]

    def append(self, entry):
        """See `IDocument`."""
        self._entries.append(entry)

    def copy(self):
        """See `IDocument`."""
        # Enumeration items are singletons, so they are shared rather
        # than deep-copied.
        document = Document(
            file_kind=self.file_kind,
            source_kind=self.source_kind,
            leading_comments=self.leading_comments,
            header=self.header.copy(),
            entries=[entry.copy() for entry in self._entries])
        document.syntax_warnings = list(self.syntax_warnings)
        return document

    def __eq__(self, other):
        if not isinstance(other, Document):
            return NotImplemented
        return (self.file_kind == other.file_kind and
                self.source_kind == other.source_kind and
                self.leading_comments == other.leading_comments and
                self.header == other.header and
                self._entries == other._entries)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __repr__(self):
        return '<Document %s, %d entries>' % (
            self.file_kind.name, len(self._entries))


def parse_assignments(text, separator=';', assigner='='):
    """Parse "assignment" expressions like the Plural-Forms value.

    >>> sorted(parse_assignments('nplurals=2; plural=(n != 1);').items())
    [('nplurals', '2'), ('plural', '(n != 1)')]
    """
    parts = {}
    for assignment in text.split(separator):
        if not assignment.strip():
            continue
        if assigner not in assignment:
            logging.info(
                'Found an error in the header content: %s' % text)
            continue
        name, value = assignment.split(assigner, 1)
        parts[name.strip()] = value.strip()
    return parts
