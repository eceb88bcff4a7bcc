# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Classify the physical lines of a PO file.

`classify_lines` lazily turns decoded PO text into `ClassifiedLine`
objects; grouping them into entries is left to `poio.parser`.
"""

__all__ = [
    'ClassifiedLine',
    'ESCAPE_MAP',
    'classify_line',
    'classify_lines',
    'parse_quoted_string',
    'split_lines',
    ]

import re

from poio.enums import LineKind
from poio.interfaces import (
    MalformedEscape,
    UnrecognizedLine,
    UnterminatedString,
    )


# Special escape sequences.
ESCAPE_MAP = {
    'a': '\a',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
    'v': '\v',
    '"': '"',
    '\'': '\'',
    '\\': '\\',
    }

# Anything up to the next double-quote or backslash.
STRAIGHT_TEXT_RUN = re.compile(r'[^"\\]*')

KEYWORD_LINE = re.compile(
    r'(msgctxt|msgid_plural|msgid|msgstr)(\[[^\]]*\])?(?=[\s"]|$)\s*(.*)$')

LINE_BREAK = re.compile(r'\r\n|\n|\r')


class ClassifiedLine:
    """A physical line with its kind and decoded payload.

    `value` depends on `kind`: a list of tokens for flags and source
    references, the decoded string for keyword and continuation lines,
    and the comment text otherwise.
    """

    def __init__(self, kind, line_number, text, value=None, keyword=None,
                 index=None, obsolete=False):
        self.kind = kind
        self.line_number = line_number
        self.text = text
        self.value = value
        self.keyword = keyword
        self.index = index
        self.obsolete = obsolete

    @property
    def is_comment(self):
        return self.kind in (
            LineKind.TRANSLATOR_COMMENT, LineKind.SOURCE_REF_COMMENT,
            LineKind.FLAGS_COMMENT, LineKind.PREVIOUS_STRING_COMMENT)

    def __repr__(self):
        return '<ClassifiedLine %d %s %r>' % (
            self.line_number, self.kind.name, self.value)


def parse_quoted_string(string, line_number=None):
    r"""Parse a quoted string, interpreting escape sequences.

    >>> parse_quoted_string('"abc"')
    'abc'
    >>> parse_quoted_string('"abc\\ndef"')
    'abc\ndef'
    >>> parse_quoted_string('"say \\"hi\\""')
    'say "hi"'

    Adjacent strings on the same line are joined:

    >>> parse_quoted_string('"ab" "cd"')
    'abcd'

    Anything else is an error:

    >>> parse_quoted_string('"ab', 4)
    Traceback (most recent call last):
    ...
    poio.interfaces.parser.UnterminatedString: Line 4: String not terminated
    >>> parse_quoted_string('"\\q"', 2)
    Traceback (most recent call last):
    ...
    poio.interfaces.parser.MalformedEscape: Line 2: Unknown escape sequence \q
    """
    if not string.startswith('"'):
        raise UnrecognizedLine(
            "String is not quoted: %s" % string, line_number)
    string = string[1:]

    output = []
    while string:
        if string[0] == '"':
            # End of the quoted string.  Another one may follow on the
            # same line, separated by whitespace only.
            string = string[1:].lstrip()
            if not string:
                return u''.join(output)
            if string[0] == '"':
                string = string[1:]
                continue
            raise UnrecognizedLine(
                "Extra content found after string: (%s)" % string,
                line_number)
        elif string[0] == '\\':
            if len(string) == 1:
                # A backslash right before the end of line escapes nothing
                # we can use; the closing quote is missing.
                break
            if string[1] not in ESCAPE_MAP:
                raise MalformedEscape(
                    "Unknown escape sequence %s" % string[:2], line_number)
            output.append(ESCAPE_MAP[string[1]])
            string = string[2:]
        else:
            # Normal text.  Eat up as much as we can in one go.
            text = STRAIGHT_TEXT_RUN.match(string).group()
            output.append(text)
            string = string[len(text):]

    raise UnterminatedString(line_number=line_number)


def _classify_keyword(stripped, line_number, obsolete):
    match = KEYWORD_LINE.match(stripped)
    if match is None:
        return None
    keyword, index, rest = match.groups()
    if index is not None:
        index = index[1:-1]
        if keyword != 'msgstr' or not index.isdigit():
            raise UnrecognizedLine(
                "Invalid keyword index: %s" % stripped, line_number)
        index = int(index)
    if not rest.startswith('"'):
        raise UnrecognizedLine(
            "Keyword %s has no string: %s" % (keyword, stripped),
            line_number)
    return ClassifiedLine(
        LineKind.KEYWORD_STRING, line_number, stripped,
        value=parse_quoted_string(rest, line_number), keyword=keyword,
        index=index, obsolete=obsolete)


def classify_line(line, line_number, obsolete=False):
    """Classify one physical line.

    :return: A `ClassifiedLine`, or None for a line that carries nothing
        (a bare '#~').
    :raise LexError: If the line cannot be classified or decoded.

    >>> classify_line('#, fuzzy, c-format', 1).value
    ['fuzzy', 'c-format']
    >>> classify_line('#: foo.c:10 bar.h:2', 1).value
    ['foo.c:10', 'bar.h:2']
    >>> line = classify_line('#~ msgstr[1] "x"', 1)
    >>> line.keyword, line.index, line.value, line.obsolete
    ('msgstr', 1, 'x', True)
    """
    stripped = line.strip()
    if not stripped:
        return ClassifiedLine(
            LineKind.BLANK, line_number, stripped, obsolete=obsolete)

    if stripped.startswith('#~') and not obsolete:
        rest = stripped[2:]
        if rest[:1] in (',', ':', '|', '.'):
            # '#~|' and friends: obsolete variants of the comment kinds.
            return classify_line('#' + rest, line_number, obsolete=True)
        rest = rest.strip()
        if not rest:
            return None
        return classify_line(rest, line_number, obsolete=True)

    if stripped.startswith('#,'):
        flags = [flag.strip() for flag in stripped[2:].split(',')]
        return ClassifiedLine(
            LineKind.FLAGS_COMMENT, line_number, stripped,
            value=[flag for flag in flags if flag], obsolete=obsolete)
    if stripped.startswith('#:'):
        return ClassifiedLine(
            LineKind.SOURCE_REF_COMMENT, line_number, stripped,
            value=stripped[2:].split(), obsolete=obsolete)
    if stripped.startswith('#|'):
        return ClassifiedLine(
            LineKind.PREVIOUS_STRING_COMMENT, line_number, stripped,
            value=stripped[2:].strip(), obsolete=obsolete)
    if stripped.startswith('#'):
        # '#.' and unknown '#X' extensions keep their marker character.
        return ClassifiedLine(
            LineKind.TRANSLATOR_COMMENT, line_number, stripped,
            value=stripped[1:], obsolete=obsolete)

    keyword_line = _classify_keyword(stripped, line_number, obsolete)
    if keyword_line is not None:
        return keyword_line

    if stripped.startswith('"'):
        return ClassifiedLine(
            LineKind.CONTINUATION, line_number, stripped,
            value=parse_quoted_string(stripped, line_number),
            obsolete=obsolete)

    raise UnrecognizedLine("Invalid content: %r" % line, line_number)


def split_lines(content_text):
    """Split decoded PO text into physical lines.

    Only CR, LF and CRLF break lines; other Unicode line separators may
    legally appear inside strings.
    """
    if content_text.startswith(u'\ufeff'):
        content_text = content_text[1:]
    return LINE_BREAK.split(content_text)


def classify_lines(content_text):
    """Yield a `ClassifiedLine` for every meaningful line of the text."""
    for line_number, line in enumerate(split_lines(content_text), 1):
        classified = classify_line(line, line_number)
        if classified is not None:
            yield classified
