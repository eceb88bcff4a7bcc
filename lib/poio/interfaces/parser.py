# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Interfaces and exceptions for reading PO files."""

__all__ = [
    'DuplicateMsgstrIndex',
    'InconsistentObsoleteMarking',
    'IPOParser',
    'LexError',
    'MalformedEscape',
    'MissingMsgid',
    'MissingMsgstr',
    'POFormatError',
    'StructuralError',
    'UnexpectedKeyword',
    'UnrecognizedLine',
    'UnterminatedString',
    ]

from zope.interface import Interface
from zope.schema import Choice

from poio.enums import FileKind


class POFormatError(Exception):
    """Base exception for fatal errors reading or writing PO files."""

    default_message = 'PO format error'

    def __init__(self, message=None, line_number=None):
        """Initialise the exception information.

        :param message: The concrete problem found.  The class default is
            used when it is None.
        :param line_number: The line number where the problem was found,
            or None when unknown.
        """
        if message is None:
            message = self.default_message
        Exception.__init__(self, message, line_number)
        self.message = message
        self.line_number = line_number

    def __str__(self):
        if self.line_number is None:
            return self.message
        return 'Line %d: %s' % (self.line_number, self.message)


class LexError(POFormatError):
    """A physical line could not be classified or decoded."""


class UnrecognizedLine(LexError):
    default_message = 'Unrecognized line'


class MalformedEscape(LexError):
    default_message = 'Unknown escape sequence'


class UnterminatedString(LexError):
    default_message = 'String not terminated'


class StructuralError(POFormatError):
    """Classified lines do not group into valid entries."""


class MissingMsgid(StructuralError):
    default_message = 'Entry does not start with msgid'


class MissingMsgstr(StructuralError):
    default_message = 'Entry has no msgstr'


class UnexpectedKeyword(StructuralError):
    default_message = 'Unexpected keyword'


class InconsistentObsoleteMarking(StructuralError):
    default_message = 'Entry is only partially marked obsolete'


class DuplicateMsgstrIndex(StructuralError):
    default_message = 'msgstr index declared twice'


class IPOParser(Interface):
    """Turns PO/POT text into an `IDocument`."""

    file_kind = Choice(
        title=u'The kind given to parsed documents.',
        vocabulary=FileKind, required=True)

    def parse(content_text):
        """Parse `content_text`, an already decoded string.

        :return: An `IDocument`.
        :raise LexError: If a line cannot be classified or decoded.
        :raise StructuralError: If lines do not form valid entries.
        """
