# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Reading and writing catalogs on disk."""

__all__ = [
    'file_kind_for_path',
    'read_po',
    'write_po',
    ]

import os.path

from poio.enums import FileKind
from poio.parser import POParser
from poio.serializer import POSerializer


def file_kind_for_path(path):
    """Guess the catalog kind from a file name.

    >>> file_kind_for_path('po/R-foo.pot').name
    'POT'
    >>> file_kind_for_path('po/R-de.po').name
    'PO'
    """
    extension = os.path.splitext(path)[1]
    if extension.lower() == '.pot':
        return FileKind.POT
    return FileKind.PO


def read_po(path, file_kind=None):
    """Parse the UTF-8 catalog at `path` into a `Document`."""
    if file_kind is None:
        file_kind = file_kind_for_path(path)
    # Line breaks are left to the lexer.
    with open(path, encoding='utf-8', newline='') as po_file:
        content = po_file.read()
    return POParser(file_kind).parse(content)


def write_po(document, path, wrap_width=None):
    """Write `document` to `path` as UTF-8 text."""
    content = POSerializer(wrap_width).serialize(document)
    with open(path, 'w', encoding='utf-8', newline='\n') as po_file:
        po_file.write(content)
