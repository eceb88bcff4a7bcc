# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Interface definitions and exceptions for the PO engine."""

# pylint: disable-msg=W0401

from poio.interfaces.document import *
from poio.interfaces.metadata import *
from poio.interfaces.parser import *
from poio.interfaces.serializer import *
