# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Enumerations used in the poio modules."""

__all__ = [
    'DiagnosticKind',
    'FileKind',
    'LineKind',
    'SourceKind',
    ]

from lazr.enum import (
    EnumeratedType,
    Item,
    )


class FileKind(EnumeratedType):
    """Catalog file kind.

    PO and POT files share one grammar, so the kind is always supplied by
    the caller rather than detected from content.
    """

    PO = Item("""
        PO

        A language-specific catalog holding translations.
        """)

    POT = Item("""
        POT

        A template catalog whose translations are all empty.
        """)


class SourceKind(EnumeratedType):
    """The layer that generated the messages of a catalog."""

    R = Item("""
        R-level

        Messages extracted from R code.
        """)

    C = Item("""
        C-level

        Messages extracted from C sources or headers.
        """)


class LineKind(EnumeratedType):
    """Classification of a physical line of a PO file."""

    BLANK = Item("""
        Blank

        An empty or whitespace-only line; separates entries.
        """)

    TRANSLATOR_COMMENT = Item("""
        Translator comment

        A '#' line, including '#.' and unknown '#X' extensions.
        """)

    SOURCE_REF_COMMENT = Item("""
        Source reference comment

        A '#:' line listing filename:line references.
        """)

    FLAGS_COMMENT = Item("""
        Flags comment

        A '#,' line with comma separated flags.
        """)

    PREVIOUS_STRING_COMMENT = Item("""
        Previous string comment

        A '#|' line holding the msgid before a fuzzy merge.
        """)

    KEYWORD_STRING = Item("""
        Keyword string

        A msgctxt, msgid, msgid_plural, msgstr or msgstr[N] line.
        """)

    CONTINUATION = Item("""
        Continuation

        A bare quoted string extending the preceding keyword string.
        """)


class DiagnosticKind(EnumeratedType):
    """Non-fatal findings reported while normalizing metadata."""

    MISSING_FIELD = Item("""
        Missing field

        A required metadata field was absent and has been added.
        """)

    DUPLICATE_FIELD = Item("""
        Duplicate field

        A metadata field appeared more than once; later copies were
        dropped.
        """)

    UPDATED_FIELD = Item("""
        Updated field

        A metadata field value was replaced by the expected one.
        """)

    MISSING_CONTEXT = Item("""
        Missing context

        A value needed to compute a field could not be resolved, so the
        field was left alone.
        """)

    MISSING_LANGUAGE = Item("""
        Missing language

        The Language field is empty, so Plural-Forms was not resolved.
        """)

    INVALID_LANGUAGE = Item("""
        Invalid language

        The Language field is not a language code gettext understands.
        """)

    UNSUPPORTED_LANGUAGE = Item("""
        Unsupported language

        No plural-forms expression is known for the language.
        """)

    FILE_KIND_MISMATCH = Item("""
        File kind mismatch

        The requested file kind differs from the document's own kind.
        """)
