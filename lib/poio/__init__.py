# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Read, repair and write gettext PO and POT catalogs."""

__all__ = [
    'CatalogGenerator',
    'Document',
    'FileKind',
    'MetadataContext',
    'MetadataNormalizer',
    'POParser',
    'POSerializer',
    'SourceKind',
    'generate',
    'normalize',
    'parse',
    'read_po',
    'serialize',
    'write_po',
    ]

from poio.context import MetadataContext
from poio.document import Document
from poio.enums import (
    FileKind,
    SourceKind,
    )
from poio.fileio import (
    read_po,
    write_po,
    )
from poio.generator import (
    CatalogGenerator,
    generate,
    )
from poio.metadata import (
    MetadataNormalizer,
    normalize,
    )
from poio.parser import (
    POParser,
    parse,
    )
from poio.serializer import (
    POSerializer,
    serialize,
    )
