"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~specmodel.exceptions.SpecmodelError` subclass.
Shell wrappers can inspect the exit code to tell a missing file from a
malformed one without parsing stderr.

Example::

    $ specmodel inspect info api.txt
    $ echo $?
    5   # EXIT_UNSUPPORTED_FORMAT -- extension is neither JSON nor YAML
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_READ_ERROR = 3
"""The spec file could not be opened or read."""

EXIT_DECODE_ERROR = 4
"""The spec text was not valid JSON/YAML or did not match the document model."""

EXIT_UNSUPPORTED_FORMAT = 5
"""The file extension is neither ``.json`` nor ``.yaml``/``.yml``."""
