# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Language codes and plural-form expressions known to gettext."""

__all__ = [
    'PLURAL_FORMS',
    'base_language',
    'is_valid_language_code',
    'lookup_plural_forms',
    ]

import re


# 'll', 'lll', optionally followed by '_CC' (or a UN M.49 region) and an
# '@variant' modifier, as used in gettext catalog names.
LANGUAGE_CODE = re.compile(
    r'^[a-z]{2,3}(_([A-Z]{2}|[0-9]{3}))?(@[a-zA-Z0-9]+)?$')

_ONE_FORM = 'nplurals=1; plural=0;'
_GERMANIC = 'nplurals=2; plural=(n != 1);'
_ROMANCE = 'nplurals=2; plural=(n > 1);'
_SLAVIC = (
    'nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : '
    'n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);')

PLURAL_FORMS = {
    'af': _GERMANIC,
    'am': _ROMANCE,
    'ar': ('nplurals=6; plural=(n==0 ? 0 : n==1 ? 1 : n==2 ? 2 : '
           'n%100>=3 && n%100<=10 ? 3 : n%100>=11 ? 4 : 5);'),
    'az': _GERMANIC,
    'be': _SLAVIC,
    'bg': _GERMANIC,
    'bn': _GERMANIC,
    'br': _ROMANCE,
    'bs': _SLAVIC,
    'ca': _GERMANIC,
    'cs': 'nplurals=3; plural=(n==1) ? 0 : (n>=2 && n<=4) ? 1 : 2;',
    'cy': ('nplurals=4; plural=(n==1) ? 0 : (n==2) ? 1 : '
           '(n != 8 && n != 11) ? 2 : 3;'),
    'da': _GERMANIC,
    'de': _GERMANIC,
    'el': _GERMANIC,
    'en': _GERMANIC,
    'eo': _GERMANIC,
    'es': _GERMANIC,
    'et': _GERMANIC,
    'eu': _GERMANIC,
    'fa': _ROMANCE,
    'fi': _GERMANIC,
    'fil': _ROMANCE,
    'fo': _GERMANIC,
    'fr': _ROMANCE,
    'fy': _GERMANIC,
    'ga': ('nplurals=5; plural=n==1 ? 0 : n==2 ? 1 : '
           '(n>2 && n<7) ? 2 :(n>6 && n<11) ? 3 : 4;'),
    'gl': _GERMANIC,
    'gu': _GERMANIC,
    'he': _GERMANIC,
    'hi': _GERMANIC,
    'hr': _SLAVIC,
    'hu': _GERMANIC,
    'hy': _GERMANIC,
    'id': _ONE_FORM,
    'is': 'nplurals=2; plural=(n%10!=1 || n%100==11);',
    'it': _GERMANIC,
    'ja': _ONE_FORM,
    'ka': _ONE_FORM,
    'kk': _ONE_FORM,
    'km': _ONE_FORM,
    'kn': _GERMANIC,
    'ko': _ONE_FORM,
    'ky': _ONE_FORM,
    'lt': ('nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : '
           'n%10>=2 && (n%100<10 || n%100>=20) ? 1 : 2);'),
    'lv': ('nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : '
           'n != 0 ? 1 : 2);'),
    'mk': 'nplurals=2; plural= n==1 || n%10==1 ? 0 : 1;',
    'ml': _GERMANIC,
    'mn': _GERMANIC,
    'mr': _GERMANIC,
    'ms': _ONE_FORM,
    'mt': ('nplurals=4; plural=(n==1 ? 0 : n==0 || ( n%100>1 && '
           'n%100<11) ? 1 : (n%100>10 && n%100<20 ) ? 2 : 3);'),
    'nb': _GERMANIC,
    'ne': _GERMANIC,
    'nl': _GERMANIC,
    'nn': _GERMANIC,
    'no': _GERMANIC,
    'oc': _ROMANCE,
    'pa': _GERMANIC,
    'pl': ('nplurals=3; plural=(n==1 ? 0 : n%10>=2 && n%10<=4 && '
           '(n%100<10 || n%100>=20) ? 1 : 2);'),
    'ps': _GERMANIC,
    'pt': _GERMANIC,
    'pt_BR': _ROMANCE,
    'ro': ('nplurals=3; plural=(n==1 ? 0 : (n==0 || (n%100 > 0 && '
           'n%100 < 20)) ? 1 : 2);'),
    'ru': _SLAVIC,
    'sk': 'nplurals=3; plural=(n==1) ? 0 : (n>=2 && n<=4) ? 1 : 2;',
    'sl': ('nplurals=4; plural=(n%100==1 ? 0 : n%100==2 ? 1 : '
           'n%100==3 || n%100==4 ? 2 : 3);'),
    'sq': _GERMANIC,
    'sr': _SLAVIC,
    'sv': _GERMANIC,
    'sw': _GERMANIC,
    'ta': _GERMANIC,
    'te': _GERMANIC,
    'th': _ONE_FORM,
    'tr': _GERMANIC,
    'uk': _SLAVIC,
    'ur': _GERMANIC,
    'uz': _ROMANCE,
    'vi': _ONE_FORM,
    'zh': _ONE_FORM,
    }


def is_valid_language_code(code):
    """Return True if `code` has the shape of a gettext language code.

    >>> is_valid_language_code('pt_BR')
    True
    >>> is_valid_language_code('sr@latin')
    True
    >>> is_valid_language_code('german')
    False
    """
    if not code:
        return False
    return LANGUAGE_CODE.match(code) is not None


def base_language(code):
    """Return the primary language subtag of `code`.

    >>> base_language('pt_BR')
    'pt'
    >>> base_language('sr@latin')
    'sr'
    """
    return re.split(r'[_@.-]', code, 1)[0]


def lookup_plural_forms(code):
    """Return the Plural-Forms expression for `code`, or None.

    Region-specific expressions win over the base language's.

    >>> lookup_plural_forms('de_AT')
    'nplurals=2; plural=(n != 1);'
    >>> lookup_plural_forms('pt_BR')
    'nplurals=2; plural=(n > 1);'
    >>> print(lookup_plural_forms('tlh'))
    None
    """
    if not code:
        return None
    if code in PLURAL_FORMS:
        return PLURAL_FORMS[code]
    return PLURAL_FORMS.get(base_language(code))
