"""Name normalization applied before querying the metadata database.

Cleaning only shapes the search query and the acceptance comparison; the
canonical Track never carries a cleaned name.
"""

import re

# Trailing " - EP", " - Single", " - Deluxe" and similar edition suffixes
_EDITION_SUFFIX = re.compile(r"\s*-\s*[^-]+$")
_FEATURING = re.compile(r"\s*\(feat\. [^)]+\)", re.IGNORECASE)


def strip_featuring(name: str) -> str:
    """Remove the first ``(feat. ...)`` group, case-insensitively.

    >>> strip_featuring("Song (feat. Someone)")
    'Song'
    """
    return _FEATURING.sub("", name, count=1)


def clean_release_name(release_name: str) -> str:
    """Strip a trailing ``" - <suffix>"`` edition marker, then ``(feat. ...)``.

    >>> clean_release_name("Album Name - Deluxe")
    'Album Name'
    """
    return strip_featuring(_EDITION_SUFFIX.sub("", release_name, count=1))
