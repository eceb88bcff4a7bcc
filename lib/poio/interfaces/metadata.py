# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Interfaces for repairing catalog metadata and generating catalogs."""

__all__ = [
    'ICatalogGenerator',
    'IDiagnostic',
    'IMetadataContext',
    'IMetadataNormalizer',
    ]

from zope.interface import (
    Attribute,
    Interface,
    )
from zope.schema import (
    Choice,
    List,
    Object,
    Text,
    TextLine,
    )

from poio.enums import DiagnosticKind


class IDiagnostic(Interface):
    """A non-fatal finding; reported, never raised."""

    kind = Choice(
        title=u'What sort of finding this is.',
        vocabulary=DiagnosticKind, required=True)

    field = TextLine(
        title=u'The metadata field concerned, or None.', required=False)

    message = Text(title=u'Human readable description.', required=True)


class IMetadataContext(Interface):
    """Externally resolved values used as metadata defaults.

    Every value is optional; a field whose input is unavailable is left
    alone and reported.
    """

    package = Attribute(
        "A PackageMetadata with name, version and bug_report_url, or None.")

    timestamp = TextLine(
        title=u'The current time, already formatted.', required=False)

    identity = Attribute(
        "An Identity with name and email for the translator, or None.")

    def is_valid_language_code(code):
        """Return True if gettext understands `code`."""

    def lookup_plural_forms(code):
        """Return the Plural-Forms expression for `code`, or None."""


class IMetadataNormalizer(Interface):
    """Validates and completes the header of a catalog."""

    context = Attribute("The IMetadataContext supplying default values.")

    diagnostics = List(
        title=u'IDiagnostic findings of the last run.',
        value_type=Object(schema=IDiagnostic), required=True)

    def normalize(target, file_kind=None, overrides=None, clone=True):
        """Normalize the metadata of `target`.

        :param target: An `IDocument` or an `IMetadata`.
        :param file_kind: Required for an `IMetadata`.  For a document it
            overrides the document's own kind.
        :param overrides: A mapping of field name to value, taking
            precedence over computed values.
        :param clone: Whether to work on a copy of `target`.
        :return: The normalized `IDocument` or `IMetadata`.
        """


class ICatalogGenerator(Interface):
    """Derives a language-specific catalog from a template."""

    diagnostics = List(
        title=u'IDiagnostic findings of the last run.',
        value_type=Object(schema=IDiagnostic), required=True)

    def generate(template, language, overrides=None):
        """Return a new PO `IDocument` for `language` from `template`."""
