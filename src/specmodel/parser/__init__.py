"""OpenAPI spec parser -- classify, load, decode and encode.

Typical usage::

    from specmodel.parser import parse_openapi_file

    doc = parse_openapi_file("openapi.yaml")
    print(doc.info.title)

Sub-modules:

* :mod:`~specmodel.parser.formats` -- extension-based encoding classifier.
* :mod:`~specmodel.parser.loader` -- scoped file read plus JSON/YAML decode
  into :class:`~specmodel.models.Document`.
* :mod:`~specmodel.parser.writer` -- the inverse: Document to JSON/YAML text.
"""

from specmodel.parser.formats import SpecFormat, detect_format
from specmodel.parser.loader import decode_spec, parse_openapi_file
from specmodel.parser.writer import dump_spec, to_wire, write_openapi_file

__all__ = [
    "SpecFormat",
    "detect_format",
    "decode_spec",
    "parse_openapi_file",
    "dump_spec",
    "to_wire",
    "write_openapi_file",
]
