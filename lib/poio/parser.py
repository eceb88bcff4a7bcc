# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Group classified PO lines into a `Document`."""

__all__ = [
    'POParser',
    'POSyntaxWarning',
    'parse',
    ]

import logging

from zope.interface import implementer

from poio.document import (
    CountableEntry,
    DirectEntry,
    Document,
    Metadata,
    )
from poio.enums import (
    FileKind,
    LineKind,
    SourceKind,
    )
from poio.interfaces import (
    DuplicateMsgstrIndex,
    InconsistentObsoleteMarking,
    IPOParser,
    MissingMsgid,
    MissingMsgstr,
    UnexpectedKeyword,
    )
from poio.lexer import classify_lines


C_SOURCE_SUFFIXES = ('.c', '.h')


class POSyntaxWarning(Warning):
    """Syntax warning in a PO file."""

    def __init__(self, message, line_number=None):
        """Create (and log) a warning.

        :param message: warning text.
        :param line_number: optional line number where the warning
            occurred.
        """
        Warning.__init__(self, message, line_number)
        self.lno = line_number
        if line_number:
            self.message = 'Line %d: %s' % (line_number, message)
        else:
            self.message = message
        logging.info(self.message)

    def __str__(self):
        return self.message


class _PartialEntry:
    """Lines of the entry being parsed, before validation."""

    def __init__(self, line_number):
        self.line_number = line_number
        self.raw_comments = []
        self.translator_comments = []
        self.source_reference_comments = []
        self.flags_comments = []
        self.previous_string_comments = []
        # (line number, obsolete) for every keyword and continuation line.
        self.markers = []
        self.section = None
        self.plural_case = None
        self.msgctxt = None
        self.msgid = None
        self.msgid_plural = None
        self.msgstr = None
        self.plurals = {}

    @property
    def has_keywords(self):
        return bool(self.markers)

    @property
    def has_msgstr(self):
        return self.section == 'msgstr'

    def addComment(self, line):
        self.raw_comments.append(line.text)
        if line.kind == LineKind.FLAGS_COMMENT:
            self.flags_comments.extend(line.value)
        elif line.kind == LineKind.SOURCE_REF_COMMENT:
            self.source_reference_comments.extend(line.value)
        elif line.kind == LineKind.PREVIOUS_STRING_COMMENT:
            self.previous_string_comments.append(line.value)
        else:
            self.translator_comments.append(line.value)

    def extend(self, text):
        """Append continuation text to the current section."""
        if self.section == 'msgctxt':
            self.msgctxt += text
        elif self.section == 'msgid':
            self.msgid += text
        elif self.section == 'msgid_plural':
            self.msgid_plural += text
        elif self.plural_case is None:
            self.msgstr += text
        else:
            self.plurals[self.plural_case] += text

    def commentKeywords(self):
        return dict(
            context=self.msgctxt,
            translator_comments=self.translator_comments,
            source_reference_comments=self.source_reference_comments,
            flags_comments=self.flags_comments,
            previous_string_comments=self.previous_string_comments)


@implementer(IPOParser)
class POParser:
    """Parser class for gettext PO and POT files."""

    def __init__(self, file_kind=FileKind.PO):
        self.file_kind = file_kind

    def _emitSyntaxWarning(self, message, line_number=None):
        warning = POSyntaxWarning(message, line_number=line_number)
        self._document.syntax_warnings.append(str(warning))

    def parse(self, content_text):
        """See `IPOParser`."""
        self._document = Document(file_kind=self.file_kind)
        self._header_done = False
        self._message_keys = set()
        self._entry = None

        last_line_number = 0
        for line in classify_lines(content_text):
            last_line_number = line.line_number
            self._parseLine(line)
        self._storeCurrentEntry(last_line_number)

        document = self._document
        document.source_kind = self._inferSourceKind(document)
        self._document = None
        return document

    def _parseLine(self, line):
        if line.kind == LineKind.BLANK:
            if self._entry is not None and self._entry.has_keywords:
                self._storeCurrentEntry(line.line_number)
            return

        if line.is_comment:
            if self._entry is not None and self._entry.has_keywords:
                # A comment after the keyword block starts a new entry.
                self._storeCurrentEntry(line.line_number)
            self._currentEntry(line).addComment(line)
            return

        if line.kind == LineKind.CONTINUATION:
            if self._entry is None or self._entry.section is None:
                raise MissingMsgid(
                    "Continuation string outside of any keyword",
                    line.line_number)
            self._entry.markers.append((line.line_number, line.obsolete))
            self._entry.extend(line.value)
            return

        if (line.keyword in ('msgctxt', 'msgid') and
            self._entry is not None and self._entry.has_msgstr):
            # Entries are not always separated by blank lines.
            self._storeCurrentEntry(line.line_number)
        entry = self._currentEntry(line)
        self._startSection(entry, line)
        entry.markers.append((line.line_number, line.obsolete))

    def _currentEntry(self, line):
        if self._entry is None:
            self._entry = _PartialEntry(line.line_number)
        return self._entry

    def _startSection(self, entry, line):
        keyword = line.keyword
        if keyword == 'msgctxt':
            if entry.section is not None:
                raise UnexpectedKeyword(
                    "Unexpected keyword: msgctxt", line.line_number)
            entry.msgctxt = line.value
        elif keyword == 'msgid':
            if entry.section not in (None, 'msgctxt'):
                raise UnexpectedKeyword(
                    "Unexpected keyword: msgid", line.line_number)
            entry.msgid = line.value
        elif keyword == 'msgid_plural':
            if entry.msgid is None:
                raise MissingMsgid(
                    "msgid_plural without msgid", line.line_number)
            if entry.section != 'msgid':
                raise UnexpectedKeyword(
                    "Unexpected keyword: msgid_plural", line.line_number)
            entry.msgid_plural = line.value
        else:
            self._startMsgstr(entry, line)
        entry.section = keyword

    def _startMsgstr(self, entry, line):
        if entry.msgid is None:
            raise MissingMsgid("msgstr without msgid", line.line_number)
        if line.index is None:
            if entry.msgid_plural is not None:
                raise UnexpectedKeyword(
                    "Plural message needs msgstr[N]", line.line_number)
            if entry.msgstr is not None:
                raise UnexpectedKeyword(
                    "Unexpected keyword: msgstr", line.line_number)
            entry.msgstr = line.value
            entry.plural_case = None
            return

        if entry.msgid_plural is None:
            raise UnexpectedKeyword(
                "msgstr[%d] without msgid_plural" % line.index,
                line.line_number)
        if line.index in entry.plurals:
            raise DuplicateMsgstrIndex(
                "msgstr[%d] declared twice" % line.index, line.line_number)
        if (entry.plural_case is not None and
            line.index != entry.plural_case + 1):
            self._emitSyntaxWarning(
                "Bad plural case number.", line.line_number)
        entry.plurals[line.index] = line.value
        entry.plural_case = line.index

    def _checkObsoleteMarking(self, entry):
        """Return whether `entry` is obsolete; it must be all or nothing."""
        obsolete = entry.markers[0][1]
        for line_number, marked in entry.markers[1:]:
            if marked != obsolete:
                raise InconsistentObsoleteMarking(line_number=line_number)
        return obsolete

    def _storeCurrentEntry(self, line_number):
        entry = self._entry
        self._entry = None
        if entry is None:
            return
        if not entry.has_keywords:
            # Only comments; nothing followed them.
            raise MissingMsgid(
                "Comments are not followed by a message", line_number)
        if entry.msgid is None:
            raise MissingMsgid(line_number=entry.line_number)
        if not entry.has_msgstr:
            raise MissingMsgstr(
                "Got a truncated message!", entry.line_number)
        is_obsolete = self._checkObsoleteMarking(entry)

        if (not self._header_done and not self._document.entries and
            entry.msgid == u'' and entry.msgctxt is None):
            self._parseHeader(entry)
            return
        self._header_done = True

        if entry.msgid_plural is None:
            message = DirectEntry(
                entry.msgid, entry.msgstr, is_obsolete=is_obsolete,
                **entry.commentKeywords())
        else:
            message = CountableEntry(
                entry.msgid, entry.msgid_plural,
                self._pluralTranslations(entry), is_obsolete=is_obsolete,
                **entry.commentKeywords())

        if message.msgid == u'' and message.context is None:
            self._emitSyntaxWarning(
                "We got a second header.", entry.line_number)
        # Obsolete entries may repeat an active msgid.
        key = (message.is_obsolete, message.key)
        if key in self._message_keys:
            self._emitSyntaxWarning(
                "Duplicate msgid %r." % message.msgid, entry.line_number)
        self._message_keys.add(key)
        self._document.append(message)

    def _pluralTranslations(self, entry):
        count = max(entry.plurals) + 1
        if count != len(entry.plurals):
            self._emitSyntaxWarning(
                "Missing msgstr[] plural cases were left empty.",
                entry.line_number)
        return [entry.plurals.get(index, u'') for index in range(count)]

    def _parseHeader(self, entry):
        self._header_done = True
        if entry.msgid_plural is not None:
            self._emitSyntaxWarning(
                "PO file header entry should have no msgid_plural.",
                entry.line_number)
            text = entry.plurals.get(0, u'')
        else:
            text = entry.msgstr
        self._document.leading_comments = entry.raw_comments
        self._document.header = Metadata.fromText(
            text, self._document.syntax_warnings)

    def _inferSourceKind(self, document):
        for entry in document.entries:
            if not entry.source_reference_comments:
                continue
            for reference in entry.source_reference_comments:
                filename, sep, line = reference.rpartition(':')
                if not sep or not line.isdigit():
                    filename = reference
                if filename.lower().endswith(C_SOURCE_SUFFIXES):
                    return SourceKind.C
            return SourceKind.R
        return SourceKind.R


def parse(content_text, file_kind=FileKind.PO):
    """Parse `content_text` into a `Document` of kind `file_kind`."""
    return POParser(file_kind).parse(content_text)
