# topmark:header:start
#
#   project      : KvgKit
#   file         : heading.py
#   file_relpath : src/kvgkit/codec/heading.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""The literal heading repeated at the top of every KanjiVG file.

The heading carries the XML declaration, the corpus licence comment and a
DOCTYPE whose internal subset declares the ``kvg:*`` attributes allowed on
``g`` and ``path`` elements. It is written verbatim by the encoder.
"""

from __future__ import annotations

import re
from typing import Final

HEADING: Final[str] = """\
<?xml version="1.0" encoding="UTF-8"?>
<!--
Copyright (C) 2009/2010/2011 Ulrich Apel.
This work is distributed under the conditions of the Creative Commons
Attribution-Share Alike 3.0 Licence. This means you are free:
* to Share - to copy, distribute and transmit the work
* to Remix - to adapt the work

Under the following conditions:
* Attribution. You must attribute the work by stating your use of KanjiVG in
  your own copyright header and linking to KanjiVG's website
  (http://kanjivg.tagaini.net)
* Share Alike. If you alter, transform, or build upon this work, you may
  distribute the resulting work only under the same or similar license to this
  one.

See http://creativecommons.org/licenses/by-sa/3.0/ for more details.
-->
<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.0//EN" "http://www.w3.org/TR/2001/REC-SVG-20010904/DTD/svg10.dtd" [
<!ATTLIST g
xmlns:kvg CDATA #FIXED "http://kanjivg.tagaini.net"
kvg:element CDATA #IMPLIED
kvg:variant CDATA #IMPLIED
kvg:partial CDATA #IMPLIED
kvg:original CDATA #IMPLIED
kvg:part CDATA #IMPLIED
kvg:number CDATA #IMPLIED
kvg:tradForm CDATA #IMPLIED
kvg:radicalForm CDATA #IMPLIED
kvg:position CDATA #IMPLIED
kvg:radical CDATA #IMPLIED
kvg:phon CDATA #IMPLIED >
<!ATTLIST path
xmlns:kvg CDATA #FIXED "http://kanjivg.tagaini.net"
kvg:type CDATA #IMPLIED >
]>
"""

# The internal DTD subset: "[", one or more ATTLIST declarations, "]".
_ATTLIST_RE: Final[re.Pattern[str]] = re.compile(r"\s*(\[\s*<!ATTLIST.*?>\s*)+\]", re.S)


def strip_attlist(heading: str = HEADING) -> str:
    """Return ``heading`` without its internal DTD subset.

    Used together with `kvgkit.strip.strip_document` to produce files that
    plain SVG parsers accept.

    Args:
        heading (str): The heading to strip.

    Returns:
        str: The heading with the ``[ <!ATTLIST ...> ... ]`` block removed.
    """
    return _ATTLIST_RE.sub("", heading)


STRIPPED_HEADING: Final[str] = strip_attlist(HEADING)
