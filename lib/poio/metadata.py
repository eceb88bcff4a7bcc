# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Validate and complete the header metadata of a catalog.

Every required field is made to exist exactly once and, where a value
can be worked out, to hold that value.  Problems never abort the run;
they are reported as `Diagnostic` objects instead.
"""

__all__ = [
    'CONSTANT_FIELDS',
    'Diagnostic',
    'MetadataNormalizer',
    'PO_REQUIRED_FIELDS',
    'POT_REQUIRED_FIELDS',
    'UNKNOWN_EMAIL',
    'UNKNOWN_NAME',
    'normalize',
    'required_fields',
    ]

import logging

from zope.interface import implementer

from poio.context import MetadataContext
from poio.enums import (
    DiagnosticKind,
    FileKind,
    )
from poio.interfaces import (
    IDiagnostic,
    IDocument,
    IMetadata,
    IMetadataNormalizer,
    )


POT_REQUIRED_FIELDS = (
    'Project-Id-Version',
    'Report-Msgid-Bugs-To',
    'POT-Creation-Date',
    'PO-Revision-Date',
    'Last-Translator',
    'Language-Team',
    'MIME-Version',
    'Content-Type',
    'Content-Transfer-Encoding',
    )

PO_REQUIRED_FIELDS = POT_REQUIRED_FIELDS + ('Language', 'Plural-Forms')

# Fields whose value does not depend on the context.
CONSTANT_FIELDS = {
    'Language-Team': u'',
    'MIME-Version': u'1.0',
    'Content-Type': u'text/plain; charset=UTF-8',
    'Content-Transfer-Encoding': u'8bit',
    }

UNKNOWN_NAME = u'FULL NAME'
UNKNOWN_EMAIL = u'EMAIL@ADDRESS'

# Diagnostics that need the caller's attention; the rest are routine.
_WARNING_KINDS = (
    DiagnosticKind.MISSING_CONTEXT,
    DiagnosticKind.MISSING_LANGUAGE,
    DiagnosticKind.INVALID_LANGUAGE,
    DiagnosticKind.UNSUPPORTED_LANGUAGE,
    DiagnosticKind.FILE_KIND_MISMATCH,
    )


def required_fields(file_kind):
    """Return the names of the fields a `file_kind` header must have.

    >>> required_fields(FileKind.PO)[-2:]
    ('Language', 'Plural-Forms')
    """
    if file_kind == FileKind.PO:
        return PO_REQUIRED_FIELDS
    return POT_REQUIRED_FIELDS


@implementer(IDiagnostic)
class Diagnostic:
    """See `IDiagnostic`.

    Diagnostics are logged as they are created.
    """

    def __init__(self, kind, field, message):
        self.kind = kind
        self.field = field
        self.message = message
        if kind in _WARNING_KINDS:
            logging.warning(message)
        else:
            logging.info(message)

    def __eq__(self, other):
        if not isinstance(other, Diagnostic):
            return NotImplemented
        return (self.kind, self.field, self.message) == (
            other.kind, other.field, other.message)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.kind.name, self.field, self.message))

    def __str__(self):
        return self.message

    def __repr__(self):
        return '<Diagnostic %s %r>' % (self.kind.name, self.message)


@implementer(IMetadataNormalizer)
class MetadataNormalizer:
    """See `IMetadataNormalizer`."""

    def __init__(self, context=None):
        if context is None:
            context = MetadataContext()
        self.context = context
        self.diagnostics = []

    def _report(self, kind, message, field=None):
        self.diagnostics.append(Diagnostic(kind, field, message))

    def normalize(self, target, file_kind=None, overrides=None, clone=True):
        """See `IMetadataNormalizer`."""
        self.diagnostics = []
        if overrides is None:
            overrides = {}

        if IDocument.providedBy(target):
            document = target.copy() if clone else target
            if file_kind is None:
                file_kind = document.file_kind
            elif file_kind != document.file_kind:
                self._report(
                    DiagnosticKind.FILE_KIND_MISMATCH,
                    "You specified a file kind (%s) that is different "
                    "from the file kind of the document (%s)." % (
                        file_kind.name, document.file_kind.name))
                document.file_kind = file_kind
            self.normalizeMetadata(document.header, file_kind, overrides)
            return document

        if IMetadata.providedBy(target):
            if file_kind is None:
                raise ValueError(
                    "A file kind is needed to normalize bare metadata.")
            metadata = target.copy() if clone else target
            self.normalizeMetadata(metadata, file_kind, overrides)
            return metadata

        raise TypeError("Cannot normalize %r." % (target,))

    def normalizeMetadata(self, metadata, file_kind, overrides):
        """Fix `metadata` in place for a catalog of kind `file_kind`."""
        self._ensureFields(metadata, file_kind)
        self._removeDuplicates(metadata)

        self._fixProjectIdVersion(metadata, overrides)
        self._fixReportMsgidBugsTo(metadata, overrides)
        # POT-Creation-Date is only ever changed on request.
        self._fixOverridden(metadata, 'POT-Creation-Date', overrides)
        self._fixPORevisionDate(metadata, overrides)
        self._fixLastTranslator(metadata, overrides)
        for field, value in CONSTANT_FIELDS.items():
            self._fixField(metadata, field, overrides.get(field, value))

        if file_kind == FileKind.PO:
            self._fixOverridden(metadata, 'Language', overrides)
            self._fixLanguage(metadata, overrides)

    def _ensureFields(self, metadata, file_kind):
        for field in required_fields(file_kind):
            if field not in metadata:
                self._report(
                    DiagnosticKind.MISSING_FIELD,
                    "Adding the missing field '%s' to the metadata." % field,
                    field)
                metadata.append(field, u'')

    def _removeDuplicates(self, metadata):
        for field in metadata.removeDuplicates():
            self._report(
                DiagnosticKind.DUPLICATE_FIELD,
                "Removing duplicate field '%s'." % field, field)

    def _fixField(self, metadata, field, expected):
        if metadata.get(field) != expected:
            self._report(
                DiagnosticKind.UPDATED_FIELD,
                "Updating the %s to '%s'." % (field, expected), field)
            metadata.set(field, expected)

    def _fixOverridden(self, metadata, field, overrides):
        if field in overrides:
            self._fixField(metadata, field, overrides[field])

    def _missingContext(self, field, inputs):
        self._report(
            DiagnosticKind.MISSING_CONTEXT,
            "No %s available; not fixing the %s field." % (inputs, field),
            field)

    def _fixProjectIdVersion(self, metadata, overrides):
        field = 'Project-Id-Version'
        if field in overrides:
            self._fixField(metadata, field, overrides[field])
            return
        package = self.context.package
        if package is None or not package.name or not package.version:
            self._missingContext(field, 'package name and version')
            return
        self._fixField(
            metadata, field, u'%s %s' % (package.name, package.version))

    def _fixReportMsgidBugsTo(self, metadata, overrides):
        field = 'Report-Msgid-Bugs-To'
        if field in overrides:
            self._fixField(metadata, field, overrides[field])
            return
        package = self.context.package
        if package is None or not package.bug_report_url:
            self._missingContext(field, 'bug report URL')
            return
        self._fixField(metadata, field, package.bug_report_url)

    def _fixPORevisionDate(self, metadata, overrides):
        field = 'PO-Revision-Date'
        if field in overrides:
            self._fixField(metadata, field, overrides[field])
            return
        if not self.context.timestamp:
            self._missingContext(field, 'timestamp')
            return
        self._fixField(metadata, field, self.context.timestamp)

    def _fixLastTranslator(self, metadata, overrides):
        field = 'Last-Translator'
        if field in overrides:
            self._fixField(metadata, field, overrides[field])
            return
        name = email = None
        identity = self.context.identity
        if identity is not None:
            name = identity.name
            email = identity.email
        self._fixField(metadata, field, u'%s <%s>' % (
            name or UNKNOWN_NAME, email or UNKNOWN_EMAIL))

    def _fixLanguage(self, metadata, overrides):
        language = metadata.get('Language')
        if not language:
            self._report(
                DiagnosticKind.MISSING_LANGUAGE,
                "No Language metadata field value found; please set it "
                "manually.", 'Language')
            return

        # Validity is only reported; the plural forms lookup goes ahead.
        if not self.context.is_valid_language_code(language):
            self._report(
                DiagnosticKind.INVALID_LANGUAGE,
                "The language code %s is not supported by GNU gettext." %
                language, 'Language')

        field = 'Plural-Forms'
        if field in overrides:
            self._fixField(metadata, field, overrides[field])
            return
        plural_forms = self.context.lookup_plural_forms(language)
        if plural_forms is None:
            self._report(
                DiagnosticKind.UNSUPPORTED_LANGUAGE,
                "No plural forms known for language %s; leaving the "
                "Plural-Forms field alone." % language, field)
            return
        self._fixField(metadata, field, plural_forms)


def normalize(target, context=None, overrides=None, file_kind=None,
              clone=True):
    """Normalize the metadata of `target`.

    :return: A (result, diagnostics) pair.
    """
    normalizer = MetadataNormalizer(context)
    result = normalizer.normalize(
        target, file_kind=file_kind, overrides=overrides, clone=clone)
    return result, normalizer.diagnostics
