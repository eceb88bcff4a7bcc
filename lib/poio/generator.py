# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Derive a language-specific catalog from a template."""

__all__ = [
    'CatalogGenerator',
    'generate',
    'plural_form_count',
    ]

import logging

from zope.interface import implementer

from poio.document import parse_assignments
from poio.enums import FileKind
from poio.interfaces import ICatalogGenerator
from poio.metadata import MetadataNormalizer


def plural_form_count(plural_forms):
    """Return the nplurals declared by a Plural-Forms value, or None.

    >>> plural_form_count('nplurals=3; plural=(n==1 ? 0 : 1);')
    3
    >>> print(plural_form_count('plural=n;'))
    None
    """
    if not plural_forms:
        return None
    nplurals = parse_assignments(plural_forms).get('nplurals')
    try:
        count = int(nplurals)
    except (TypeError, ValueError):
        return None
    if count < 1:
        return None
    return count


@implementer(ICatalogGenerator)
class CatalogGenerator:
    """See `ICatalogGenerator`."""

    def __init__(self, context=None):
        self.normalizer = MetadataNormalizer(context)
        self.diagnostics = []

    def generate(self, template, language, overrides=None):
        """See `ICatalogGenerator`."""
        document = template.copy()
        document.file_kind = FileKind.PO
        document.syntax_warnings = []
        if 'Plural-Forms' in document.header:
            # Stale plural rules from the template must not survive if
            # the new language has none.
            document.header.set('Plural-Forms', u'')

        merged = dict(overrides or {})
        merged['Language'] = language
        self.normalizer.normalize(
            document, overrides=merged, clone=False)
        self.diagnostics = list(self.normalizer.diagnostics)

        nplurals = plural_form_count(document.header.get('Plural-Forms'))
        for entry in document.direct_entries:
            entry.clearTranslations()
        for entry in document.countable_entries:
            entry.clearTranslations(nplurals)
        logging.info(
            "Generated a %s catalog with %d entries." % (
                language, len(document.entries)))
        return document


def generate(template, language, context=None, overrides=None):
    """Return a new PO `Document` for `language` built from `template`."""
    return CatalogGenerator(context).generate(
        template, language, overrides=overrides)
