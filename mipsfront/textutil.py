"""Text helpers for line-ending normalisation."""

from __future__ import annotations

import re
from typing import Optional

_LINE_BREAK = re.compile(r"\r\n|\n\r|\r|\n")


def make_crlf_valid(text: str) -> Optional[str]:
    """Turn every line break in ``text`` into CR LF.

    A CR LF pair is kept, an LF CR pair becomes CR LF, and a lone CR or LF
    becomes CR LF. Empty text gives None.
    """
    if not text:
        return None
    return _LINE_BREAK.sub("\r\n", text)