# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Tests for header metadata normalization."""

from fixtures import FakeLogger
from testtools import TestCase
from zope.interface.verify import verifyObject

from poio.context import (
    Identity,
    MetadataContext,
    PackageMetadata,
    )
from poio.document import (
    DirectEntry,
    Document,
    Metadata,
    )
from poio.enums import (
    DiagnosticKind,
    FileKind,
    )
from poio.interfaces import (
    IDiagnostic,
    IMetadataContext,
    IMetadataNormalizer,
    )
from poio.metadata import (
    Diagnostic,
    MetadataNormalizer,
    PO_REQUIRED_FIELDS,
    POT_REQUIRED_FIELDS,
    normalize,
    )


TIMESTAMP = u'2026-01-02 03:04:05+0000'


def make_context(**kw):
    values = dict(
        package=PackageMetadata(
            u'foo', u'1.0', u'https://bugs.example.com/foo'),
        timestamp=TIMESTAMP,
        identity=Identity(u'Jo Translator', u'jo@example.com'))
    values.update(kw)
    return MetadataContext(**values)


def kinds(diagnostics):
    return [diagnostic.kind for diagnostic in diagnostics]


class TestMetadataNormalizer(TestCase):

    def setUp(self):
        super(TestMetadataNormalizer, self).setUp()
        self.logger = self.useFixture(FakeLogger())

    def test_implements_interfaces(self):
        normalizer = MetadataNormalizer(make_context())
        self.assertTrue(verifyObject(IMetadataNormalizer, normalizer))
        self.assertTrue(verifyObject(IMetadataContext, normalizer.context))

    def test_diagnostics_field_holds_diagnostics(self):
        field = IMetadataNormalizer['diagnostics']
        self.assertIs(IDiagnostic, field.value_type.schema)

    def test_template_fields(self):
        metadata, diagnostics = normalize(
            Metadata(), make_context(), file_kind=FileKind.POT)
        self.assertEqual(
            [(u'Project-Id-Version', u'foo 1.0'),
             (u'Report-Msgid-Bugs-To', u'https://bugs.example.com/foo'),
             (u'POT-Creation-Date', u''),
             (u'PO-Revision-Date', TIMESTAMP),
             (u'Last-Translator', u'Jo Translator <jo@example.com>'),
             (u'Language-Team', u''),
             (u'MIME-Version', u'1.0'),
             (u'Content-Type', u'text/plain; charset=UTF-8'),
             (u'Content-Transfer-Encoding', u'8bit')],
            metadata.items())
        self.assertEqual(
            [DiagnosticKind.MISSING_FIELD] * len(POT_REQUIRED_FIELDS),
            kinds(diagnostics)[:len(POT_REQUIRED_FIELDS)])
        self.assertEqual(
            [u'Project-Id-Version', u'Report-Msgid-Bugs-To',
             u'PO-Revision-Date', u'Last-Translator', u'MIME-Version',
             u'Content-Type', u'Content-Transfer-Encoding'],
            [diagnostic.field for diagnostic in diagnostics
             if diagnostic.kind == DiagnosticKind.UPDATED_FIELD])

    def test_template_has_no_language_fields(self):
        metadata, diagnostics = normalize(
            Metadata(), make_context(), file_kind=FileKind.POT)
        self.assertNotIn(u'Language', metadata)
        self.assertNotIn(u'Plural-Forms', metadata)

    def test_existing_fields_keep_their_place(self):
        metadata, diagnostics = normalize(
            Metadata([(u'X-Generator', u'poio'), (u'MIME-Version', u'0.9')]),
            make_context(), file_kind=FileKind.POT)
        self.assertEqual(
            [u'X-Generator', u'MIME-Version'], metadata.names()[:2])
        self.assertEqual(u'1.0', metadata.get(u'MIME-Version'))
        self.assertEqual(u'poio', metadata.get(u'X-Generator'))

    def test_idempotent(self):
        context = make_context()
        first, diagnostics = normalize(
            Metadata([(u'Language', u'de')]), context,
            file_kind=FileKind.PO)
        second, diagnostics = normalize(
            first, context, file_kind=FileKind.PO)
        self.assertEqual(first, second)
        self.assertEqual([], diagnostics)

    def test_duplicates_keep_first(self):
        metadata, diagnostics = normalize(
            Metadata([(u'MIME-Version', u'1.0'), (u'MIME-Version', u'2.0'),
                      (u'X-Custom', u'a'), (u'X-Custom', u'b')]),
            make_context(), file_kind=FileKind.POT)
        self.assertEqual(
            [u'MIME-Version', u'X-Custom'],
            [diagnostic.field for diagnostic in diagnostics
             if diagnostic.kind == DiagnosticKind.DUPLICATE_FIELD])
        self.assertEqual(1, metadata.names().count(u'MIME-Version'))
        self.assertEqual(u'a', metadata.get(u'X-Custom'))
        self.assertEqual(
            sorted(set(metadata.names())), sorted(metadata.names()))

    def test_pot_creation_date_is_not_touched(self):
        metadata, diagnostics = normalize(
            Metadata([(u'POT-Creation-Date', u'2020-01-01 00:00+0000')]),
            make_context(), file_kind=FileKind.POT)
        self.assertEqual(
            u'2020-01-01 00:00+0000', metadata.get(u'POT-Creation-Date'))

    def test_overrides_win(self):
        overrides = {
            u'POT-Creation-Date': u'2025-12-24 18:00+0100',
            u'Last-Translator': u'Dr. Daniel Jackson <dj@example.com>',
            u'Language-Team': u'Team RL10N!',
            u'Project-Id-Version': u'bar 2.0',
            }
        metadata, diagnostics = normalize(
            Metadata(), make_context(), overrides=overrides,
            file_kind=FileKind.POT)
        for field, value in overrides.items():
            self.assertEqual(value, metadata.get(field))

    def test_overrides_need_no_context(self):
        metadata, diagnostics = normalize(
            Metadata(), MetadataContext(),
            overrides={u'PO-Revision-Date': TIMESTAMP},
            file_kind=FileKind.POT)
        self.assertEqual(TIMESTAMP, metadata.get(u'PO-Revision-Date'))
        self.assertEqual(
            [u'Project-Id-Version', u'Report-Msgid-Bugs-To'],
            [diagnostic.field for diagnostic in diagnostics
             if diagnostic.kind == DiagnosticKind.MISSING_CONTEXT])

    def test_missing_context_leaves_fields_alone(self):
        metadata, diagnostics = normalize(
            Metadata([(u'Project-Id-Version', u'old 0.1')]),
            MetadataContext(), file_kind=FileKind.POT)
        self.assertEqual(u'old 0.1', metadata.get(u'Project-Id-Version'))
        self.assertEqual(u'', metadata.get(u'PO-Revision-Date'))
        self.assertEqual(
            [u'Project-Id-Version', u'Report-Msgid-Bugs-To',
             u'PO-Revision-Date'],
            [diagnostic.field for diagnostic in diagnostics
             if diagnostic.kind == DiagnosticKind.MISSING_CONTEXT])
        self.assertIn(u'not fixing the Project-Id-Version', self.logger.output)

    def test_package_without_bug_tracker(self):
        context = make_context(package=PackageMetadata(u'foo', u'1.0'))
        metadata, diagnostics = normalize(
            Metadata(), context, file_kind=FileKind.POT)
        self.assertEqual(u'foo 1.0', metadata.get(u'Project-Id-Version'))
        self.assertEqual(
            [u'Report-Msgid-Bugs-To'],
            [diagnostic.field for diagnostic in diagnostics
             if diagnostic.kind == DiagnosticKind.MISSING_CONTEXT])

    def test_unknown_translator(self):
        metadata, diagnostics = normalize(
            Metadata(), make_context(identity=None), file_kind=FileKind.POT)
        self.assertEqual(
            u'FULL NAME <EMAIL@ADDRESS>', metadata.get(u'Last-Translator'))

    def test_translator_with_email_only(self):
        metadata, diagnostics = normalize(
            Metadata(), make_context(identity=Identity(email=u'jo@x.org')),
            file_kind=FileKind.POT)
        self.assertEqual(
            u'FULL NAME <jo@x.org>', metadata.get(u'Last-Translator'))

    def test_po_fields(self):
        metadata, diagnostics = normalize(
            Metadata([(u'Language', u'de')]), make_context(),
            file_kind=FileKind.PO)
        self.assertEqual(
            sorted(PO_REQUIRED_FIELDS), sorted(metadata.names()))
        self.assertEqual(
            u'nplurals=2; plural=(n != 1);', metadata.get(u'Plural-Forms'))

    def test_empty_language_stops(self):
        looked_up = []

        def lookup(code):
            looked_up.append(code)
            return u'nplurals=1; plural=0;'

        metadata, diagnostics = normalize(
            Metadata(), make_context(lookup_plural_forms=lookup),
            file_kind=FileKind.PO)
        self.assertEqual(DiagnosticKind.MISSING_LANGUAGE, diagnostics[-1].kind)
        self.assertEqual(u'', metadata.get(u'Language'))
        self.assertEqual(u'', metadata.get(u'Plural-Forms'))
        self.assertEqual([], looked_up)

    def test_language_override(self):
        metadata, diagnostics = normalize(
            Metadata(), make_context(), overrides={u'Language': u'fr'},
            file_kind=FileKind.PO)
        self.assertEqual(u'fr', metadata.get(u'Language'))
        self.assertEqual(
            u'nplurals=2; plural=(n > 1);', metadata.get(u'Plural-Forms'))

    def test_region_falls_back_to_base_language(self):
        metadata, diagnostics = normalize(
            Metadata([(u'Language', u'de_CH')]), make_context(),
            file_kind=FileKind.PO)
        self.assertEqual(
            u'nplurals=2; plural=(n != 1);', metadata.get(u'Plural-Forms'))

    def test_unsupported_language(self):
        metadata, diagnostics = normalize(
            Metadata([(u'Language', u'tlh'),
                      (u'Plural-Forms', u'nplurals=1; plural=0;')]),
            make_context(), file_kind=FileKind.PO)
        self.assertEqual(
            DiagnosticKind.UNSUPPORTED_LANGUAGE, diagnostics[-1].kind)
        self.assertEqual(
            u'nplurals=1; plural=0;', metadata.get(u'Plural-Forms'))
        self.assertNotIn(DiagnosticKind.INVALID_LANGUAGE, kinds(diagnostics))

    def test_invalid_language_still_looks_up_plural_forms(self):
        context = make_context(
            is_valid_language_code=lambda code: False,
            lookup_plural_forms=lambda code: u'nplurals=1; plural=0;')
        metadata, diagnostics = normalize(
            Metadata([(u'Language', u'xx')]), context,
            file_kind=FileKind.PO)
        self.assertIn(DiagnosticKind.INVALID_LANGUAGE, kinds(diagnostics))
        self.assertEqual(
            u'nplurals=1; plural=0;', metadata.get(u'Plural-Forms'))
        self.assertIn(u'not supported by GNU gettext', self.logger.output)

    def test_plural_forms_override(self):
        metadata, diagnostics = normalize(
            Metadata([(u'Language', u'tlh')]), make_context(),
            overrides={u'Plural-Forms': u'nplurals=2; plural=n>1;'},
            file_kind=FileKind.PO)
        self.assertEqual(
            u'nplurals=2; plural=n>1;', metadata.get(u'Plural-Forms'))
        self.assertNotIn(
            DiagnosticKind.UNSUPPORTED_LANGUAGE, kinds(diagnostics))

    def test_metadata_needs_file_kind(self):
        self.assertRaises(ValueError, normalize, Metadata())

    def test_rejects_other_targets(self):
        self.assertRaises(
            TypeError, normalize, {}, file_kind=FileKind.PO)

    def test_metadata_clone(self):
        original = Metadata()
        normalize(original, make_context(), file_kind=FileKind.POT)
        self.assertEqual(0, len(original))
        normalize(
            original, make_context(), file_kind=FileKind.POT, clone=False)
        self.assertEqual(len(POT_REQUIRED_FIELDS), len(original))


class TestNormalizeDocument(TestCase):

    def setUp(self):
        super(TestNormalizeDocument, self).setUp()
        self.useFixture(FakeLogger())

    def makeDocument(self, file_kind=FileKind.PO):
        return Document(
            file_kind=file_kind,
            header=Metadata([(u'Language', u'pl')]),
            entries=[DirectEntry(u'Hello', u'Cześć')])

    def test_clone_by_default(self):
        document = self.makeDocument()
        result, diagnostics = normalize(document, make_context())
        self.assertIsNot(document, result)
        self.assertEqual([(u'Language', u'pl')], document.header.items())
        self.assertEqual(
            u'nplurals=3; plural=(n==1 ? 0 : n%10>=2 && n%10<=4 && '
            u'(n%100<10 || n%100>=20) ? 1 : 2);',
            result.header.get(u'Plural-Forms'))
        self.assertEqual(document.entries, result.entries)

    def test_in_place(self):
        document = self.makeDocument()
        result, diagnostics = normalize(
            document, make_context(), clone=False)
        self.assertIs(document, result)
        self.assertIn(u'Plural-Forms', document.header)

    def test_file_kind_comes_from_document(self):
        result, diagnostics = normalize(
            self.makeDocument(FileKind.POT), make_context())
        self.assertNotIn(u'Plural-Forms', result.header)

    def test_file_kind_mismatch(self):
        result, diagnostics = normalize(
            self.makeDocument(FileKind.POT), make_context(),
            file_kind=FileKind.PO)
        self.assertEqual(
            DiagnosticKind.FILE_KIND_MISMATCH, diagnostics[0].kind)
        self.assertEqual(FileKind.PO, result.file_kind)
        self.assertIn(u'Plural-Forms', result.header)

    def test_normalizer_keeps_last_diagnostics(self):
        normalizer = MetadataNormalizer(make_context())
        normalizer.normalize(self.makeDocument())
        self.assertNotEqual([], normalizer.diagnostics)
        normalizer.normalize(
            normalizer.normalize(self.makeDocument()))
        self.assertEqual([], normalizer.diagnostics)


class TestDiagnostic(TestCase):

    def test_implements_interface(self):
        self.useFixture(FakeLogger())
        diagnostic = Diagnostic(
            DiagnosticKind.UPDATED_FIELD, u'MIME-Version', u'Updated.')
        self.assertTrue(verifyObject(IDiagnostic, diagnostic))
        self.assertEqual(u'Updated.', str(diagnostic))

    def test_logging_levels(self):
        logger = self.useFixture(
            FakeLogger(format='%(levelname)s %(message)s'))
        Diagnostic(DiagnosticKind.UPDATED_FIELD, None, u'Routine.')
        Diagnostic(DiagnosticKind.MISSING_LANGUAGE, None, u'Attention.')
        self.assertEqual(
            u'INFO Routine.\nWARNING Attention.\n', logger.output)
