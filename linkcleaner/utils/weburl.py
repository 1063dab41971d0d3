"""
Web URL type.
Splits with urllib.parse and hands host, port and path normalisation to url-normalize
(lowercase host, IDNA, default ports, dot segments). Query and fragment are only
percent-encoded where WHATWG requires it, so a URL that is not cleaned comes back as given.
"""
from urllib.parse import quote, urlsplit

from url_normalize import url_normalize

# Schemes that always carry an authority and a hierarchical path
SPECIAL_SCHEMES = ('http', 'https', 'ftp')

_FORBIDDEN_HOST_CHARS = set(' \t\n\r#%/:<>?@[\\]^|')

# WHATWG percent-encode sets, beyond C0 controls and non-ASCII
_FRAGMENT_SET = ' "<>`'
_QUERY_SET = ' "#<>\''
_PATH_SET = ' "#<>?`{}'


class UrlParseError(ValueError):
    """Raised when text cannot be parsed into an absolute URL."""


class WebUrl:
    """
    A parsed absolute URL.

    query and fragment are None when absent and '' when the URL ends in a bare
    '?' or '#', so serialisation gives back what was parsed.
    """

    def __init__(self, scheme, netloc='', path='', query=None, fragment=None,
                 has_authority=True):
        self.scheme = scheme
        self.netloc = netloc
        self.path = path
        self.query = query
        self.fragment = fragment
        self.has_authority = has_authority

    @classmethod
    def parse(cls, text: str) -> 'WebUrl':
        text = text.strip()
        parts = _split(text)

        scheme = parts.scheme
        if not scheme:
            raise UrlParseError('relative URL without a base')

        if scheme in SPECIAL_SCHEMES:
            # backslashes before the query read as slashes in web URLs
            head, sep, tail = _split_head(text)
            if '\\' in head:
                text = head.replace('\\', '/') + sep + tail
                parts = _split(text)

        # urlsplit only splits off query/fragment when text is present; look at the raw
        # text so a trailing '?' or '#' survives
        before_fragment, hash_sign, _ = text.partition('#')
        query = parts.query if '?' in before_fragment else None
        fragment = parts.fragment if hash_sign else None

        after_scheme = text[len(scheme) + 1:]
        if scheme in SPECIAL_SCHEMES:
            if not after_scheme.startswith('//'):
                # "http:example.com/x" is read as "http://example.com/x"
                return cls.parse(f"{scheme}://{after_scheme.lstrip('/')}")
            netloc, path = _normalise_authority_and_path(parts)
            return cls(scheme, netloc, path,
                       _encode_optional(query, _QUERY_SET),
                       _encode_optional(fragment, _FRAGMENT_SET))

        has_authority = after_scheme.startswith('//')
        return cls(scheme, parts.netloc, _encode(parts.path, _PATH_SET),
                   _encode_optional(query, _QUERY_SET),
                   _encode_optional(fragment, _FRAGMENT_SET),
                   has_authority=has_authority)

    @property
    def cannot_be_base(self) -> bool:
        """True for opaque URLs such as 'mailto:a@b.c' that have no path hierarchy."""
        return not self.has_authority and not self.path.startswith('/')

    def path_segments(self) -> list[str] | None:
        """The '/'-separated path components, or None for an opaque URL."""
        if self.cannot_be_base:
            return None
        if not self.path:
            return []
        return self.path[1:].split('/')

    def set_path(self, path: str) -> None:
        if not self.cannot_be_base and not path.startswith('/'):
            path = '/' + path
        self.path = _encode(path, _PATH_SET)

    def set_query(self, query: str | None) -> None:
        self.query = _encode_optional(query, _QUERY_SET)

    def set_fragment(self, fragment: str | None) -> None:
        self.fragment = _encode_optional(fragment, _FRAGMENT_SET)

    def __str__(self):
        out = f"{self.scheme}:"
        if self.has_authority:
            out += f"//{self.netloc}"
        out += self.path
        if self.query is not None:
            out += f"?{self.query}"
        if self.fragment is not None:
            out += f"#{self.fragment}"
        return out

    def __repr__(self):
        return f"WebUrl({str(self)!r})"

    def __eq__(self, other):
        if not isinstance(other, WebUrl):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self):
        return hash(str(self))


def _split(text):
    try:
        return urlsplit(text)
    except ValueError as e:
        raise UrlParseError(str(e)) from e


def _split_head(text):
    """Split text at the first '?' or '#' into (head, separator, tail)."""
    for i, ch in enumerate(text):
        if ch in '?#':
            return text[:i], ch, text[i + 1:]
    return text, '', ''


def _normalise_authority_and_path(parts):
    """
    Validate the authority, then let url-normalize rewrite it together with the path.
    Returns (netloc, path) with path always starting with '/'.
    """
    hostname = parts.hostname or ''
    if not hostname:
        raise UrlParseError('empty host')
    if any(ch in _FORBIDDEN_HOST_CHARS for ch in hostname):
        raise UrlParseError('invalid domain character')
    try:
        parts.port
    except ValueError as e:
        raise UrlParseError('invalid port number') from e

    prefix = f"{parts.scheme}://"
    try:
        normalised = url_normalize(f"{prefix}{parts.netloc}{parts.path}")
    except UnicodeError as e:
        raise UrlParseError('invalid international domain name') from e

    netloc, slash, path = normalised[len(prefix):].partition('/')
    return netloc, slash + path or '/'


def _encode(value: str, encode_set: str) -> str:
    # quote() always leaves ASCII letters, digits and '_.-~' alone; everything else
    # printable is kept unless the set names it, and existing escapes stay as they are
    safe = ''.join(chr(c) for c in range(0x21, 0x7f) if chr(c) not in encode_set)
    return quote(value, safe=safe)


def _encode_optional(value, encode_set):
    if value is None:
        return None
    return _encode(value, encode_set)
