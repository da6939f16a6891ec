"""
Command-line argument parsing.

Arguments use the ``key:value`` form (``/in:report.rpt``) rather than
POSIX options, and one level of nesting is supported for converter options
(``/crystal:UnrecognizedFunctionBehavior=Ignore;Other=1``).
"""

from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, Optional, Sequence, Tuple

from reports_import.errors import DuplicateArgumentError, UsageError

MIN_ARGUMENTS = 2


class ArgumentMap(Mapping):
    """Read-only mapping with case-insensitive string keys.

    Iteration yields keys with the casing they were given in.
    """

    def __init__(self, items: Iterable[Tuple[str, Optional[str]]] = ()):
        self._items: Dict[str, Tuple[str, Optional[str]]] = {}
        for key, value in items:
            folded = key.casefold()
            if folded in self._items:
                raise DuplicateArgumentError(key)
            self._items[folded] = (key, value)

    def __getitem__(self, key: str) -> Optional[str]:
        return self._items[key.casefold()][1]

    def __contains__(self, key) -> bool:
        return isinstance(key, str) and key.casefold() in self._items

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArgumentMap({dict(self.items())!r})"


def parse_arguments(tokens: Sequence[str]) -> ArgumentMap:
    """Build the argument map from raw command-line tokens.

    Args:
        tokens: Command-line tokens, without the program name

    Returns:
        Case-insensitive mapping of argument keys to values

    Raises:
        UsageError: Fewer than two tokens, or a token without ``:``
        DuplicateArgumentError: The same key appears twice
    """
    if len(tokens) < MIN_ARGUMENTS:
        raise UsageError()

    pairs = []
    for token in tokens:
        key, separator, value = token.partition(":")
        if not separator:
            raise UsageError()
        pairs.append((key, value))
    return ArgumentMap(pairs)


def parse_sub_arguments(arguments: Mapping, key: str) -> ArgumentMap:
    """Split a nested ``name=value;name2=value2`` argument.

    A missing argument is not an error: converter options are optional.
    An entry without ``=`` maps to None.

    Args:
        arguments: Top-level argument map
        key: Argument holding the nested options (e.g. ``/crystal``)

    Returns:
        Case-insensitive mapping of option names to values
    """
    if key not in arguments:
        return ArgumentMap()

    pairs = []
    for entry in arguments[key].split(";"):
        name, separator, value = entry.partition("=")
        pairs.append((name, value if separator else None))
    return ArgumentMap(pairs)
