# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Render a `Document` as PO/POT text."""

__all__ = [
    'POSerializer',
    'escape_string',
    'serialize',
    ]

import re

from zope.interface import implementer

from poio.interfaces import (
    ICountableEntry,
    IPOSerializer,
    UnrepresentableValue,
    )


ESCAPE_TABLE = {
    ord('\\'): u'\\\\',
    ord('"'): u'\\"',
    ord('\a'): u'\\a',
    ord('\b'): u'\\b',
    ord('\f'): u'\\f',
    ord('\n'): u'\\n',
    ord('\r'): u'\\r',
    ord('\t'): u'\\t',
    ord('\v'): u'\\v',
    }

UNREPRESENTABLE = re.compile(u'[\x00\ud800-\udfff]')

# Split points for wrapping: after an escaped newline, after a space.
AFTER_ESCAPED_NEWLINE = re.compile(r'(?<=\\n)')
AFTER_SPACE = re.compile(r'(?<= )')


def escape_string(text):
    r"""Escape `text` for use between double quotes in a PO file.

    >>> escape_string('say "hi"\n')
    'say \\"hi\\"\\n'
    >>> escape_string('C:\\temp\t1')
    'C:\\\\temp\\t1'
    """
    bad = UNREPRESENTABLE.search(text)
    if bad is not None:
        raise UnrepresentableValue(
            "Cannot represent %r in %r" % (bad.group(), text))
    return text.translate(ESCAPE_TABLE)


@implementer(IPOSerializer)
class POSerializer:
    """See `IPOSerializer`.

    Entries are written in document order and separated by one blank
    line.  Comments come before the keyword block, previous strings
    first, then translator comments, source references and flags.
    """

    def __init__(self, wrap_width=None):
        self.wrap_width = wrap_width

    def serialize(self, document):
        """See `IPOSerializer`."""
        chunks = [self.exportHeader(document)]
        for entry in document.entries:
            chunks.append(self.exportEntry(entry))
        return u'\n\n'.join(chunks) + u'\n'

    def exportHeader(self, document):
        """Return the header entry, comments included, as text."""
        lines = list(document.leading_comments)
        lines.extend(self._wrap(u'msgid', u''))
        lines.extend(self._wrap(u'msgstr', document.header.asText()))
        return u'\n'.join(lines)

    def exportEntry(self, entry):
        """Return a single message entry as text."""
        lines = self._commentLines(entry)

        keyword_lines = []
        if entry.context is not None:
            keyword_lines.extend(self._wrap(u'msgctxt', entry.context))
        keyword_lines.extend(self._wrap(u'msgid', entry.msgid))
        if ICountableEntry.providedBy(entry):
            keyword_lines.extend(
                self._wrap(u'msgid_plural', entry.msgid_plural))
            translations = entry.msgstr or [u'', u'']
            for index, translation in enumerate(translations):
                keyword_lines.extend(
                    self._wrap(u'msgstr[%d]' % index, translation))
        else:
            keyword_lines.extend(self._wrap(u'msgstr', entry.msgstr))

        if entry.is_obsolete:
            keyword_lines = [u'#~ ' + line for line in keyword_lines]
        return u'\n'.join(lines + keyword_lines)

    def _commentLines(self, entry):
        lines = []
        for comment in entry.previous_string_comments:
            lines.append(u'#| ' + comment)
        for comment in entry.translator_comments:
            lines.append(u'#' + comment)
        if entry.source_reference_comments:
            lines.extend(
                self._referenceLines(entry.source_reference_comments))
        if entry.flags_comments:
            lines.append(u'#, ' + u', '.join(entry.flags_comments))
        return lines

    def _referenceLines(self, references):
        if self.wrap_width is None:
            return [u'#: ' + u' '.join(references)]
        lines = []
        current = []
        for reference in references:
            candidate = u'#: ' + u' '.join(current + [reference])
            if current and len(candidate) > self.wrap_width:
                lines.append(u'#: ' + u' '.join(current))
                current = []
            current.append(reference)
        lines.append(u'#: ' + u' '.join(current))
        return lines

    def _wrap(self, keyword, text):
        r"""Return the physical lines for `keyword` holding `text`.

        >>> POSerializer(wrap_width=20)._wrap('msgid', 'abcdefghijkl')
        ['msgid "abcdefghijkl"']
        >>> POSerializer(wrap_width=20)._wrap('msgid', 'abcdef hijklm')
        ['msgid ""', '"abcdef hijklm"']
        >>> POSerializer(wrap_width=20)._wrap('msgid', 'abcdefghijklmnopqr st')
        ['msgid ""', '"abcdefghijklmnopqr "', '"st"']
        >>> POSerializer(wrap_width=20)._wrap('msgstr', 'abc\ndef')
        ['msgstr ""', '"abc\\n"', '"def"']

        Without a wrap width every string stays on one line:

        >>> POSerializer()._wrap('msgstr', 'abc\ndef')
        ['msgstr "abc\\ndef"']
        """
        escaped = escape_string(text)
        unwrapped = u'%s "%s"' % (keyword, escaped)
        if self.wrap_width is None:
            return [unwrapped]
        if len(unwrapped) <= self.wrap_width and u'\n' not in text[:-1]:
            return [unwrapped]

        lines = [u'%s ""' % keyword]
        for paragraph in AFTER_ESCAPED_NEWLINE.split(escaped):
            if not paragraph:
                continue
            for chunk in self._chunks(paragraph):
                lines.append(u'"%s"' % chunk)
        return lines

    def _chunks(self, paragraph):
        # Two columns go to the surrounding quotes.
        width = self.wrap_width - 2
        if len(paragraph) <= width:
            return [paragraph]
        chunks = []
        current = u''
        for word in AFTER_SPACE.split(paragraph):
            if current and len(current) + len(word) > width:
                chunks.append(current)
                current = u''
            current += word
        if current:
            chunks.append(current)
        return chunks


def serialize(document, wrap_width=None):
    """Return the PO text for `document`."""
    return POSerializer(wrap_width).serialize(document)
