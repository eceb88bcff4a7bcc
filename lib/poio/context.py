# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Default values used when normalizing catalog metadata."""

__all__ = [
    'Identity',
    'MetadataContext',
    'PackageMetadata',
    'TIMESTAMP_FORMAT',
    'current_timestamp',
    'resolve_local_identity',
    ]

import datetime
import os
import pwd

import pytz
from zope.interface import implementer

from poio import languages
from poio.interfaces import IMetadataContext


TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S%z'


class PackageMetadata:
    """Name, version and bug tracker of the package being translated."""

    def __init__(self, name, version, bug_report_url=None):
        self.name = name
        self.version = version
        self.bug_report_url = bug_report_url

    def __repr__(self):
        return '<PackageMetadata %s %s>' % (self.name, self.version)


class Identity:
    """Who is editing the catalog."""

    def __init__(self, name=None, email=None):
        self.name = name
        self.email = email

    def __repr__(self):
        return '<Identity %s <%s>>' % (self.name, self.email)


def current_timestamp(now=None):
    """Return `now`, or the current time, formatted for a PO header.

    >>> from datetime import datetime
    >>> current_timestamp(datetime(2026, 3, 1, 12, 30, 0))
    '2026-03-01 12:30:00+0000'
    """
    if now is None:
        now = datetime.datetime.now(pytz.utc)
    elif now.tzinfo is None:
        now = pytz.utc.localize(now)
    return now.strftime(TIMESTAMP_FORMAT)


def resolve_local_identity(environ=None):
    """Work out the name and email address of the local user.

    The FULLNAME and EMAIL environment variables win; the name falls
    back to the password database.  Returns None when nothing is known.
    """
    if environ is None:
        environ = os.environ
    name = environ.get('FULLNAME')
    email = environ.get('EMAIL')
    if not name:
        try:
            gecos = pwd.getpwuid(os.getuid()).pw_gecos
        except KeyError:
            gecos = ''
        name = gecos.split(',')[0].strip() or None
    if not name and not email:
        return None
    return Identity(name, email)


@implementer(IMetadataContext)
class MetadataContext:
    """See `IMetadataContext`.

    Values left as None are reported as unavailable by the normalizer.
    Language checks default to the tables in `poio.languages`.
    """

    def __init__(self, package=None, timestamp=None, identity=None,
                 is_valid_language_code=None, lookup_plural_forms=None):
        self.package = package
        self.timestamp = timestamp
        self.identity = identity
        if is_valid_language_code is None:
            is_valid_language_code = languages.is_valid_language_code
        if lookup_plural_forms is None:
            lookup_plural_forms = languages.lookup_plural_forms
        self.is_valid_language_code = is_valid_language_code
        self.lookup_plural_forms = lookup_plural_forms

    @classmethod
    def fromEnvironment(cls, package=None, **kw):
        """Return a context with the time and identity of this process."""
        return cls(
            package=package, timestamp=current_timestamp(),
            identity=resolve_local_identity(), **kw)
