import re

from .errors import MalformedPathError
from .taxon import Taxon
from .taxopath import Taxopath

DEFAULT_DELIMITERS = ";"

# ASCII whitespace only; other Unicode spaces are kept as part of the name
WHITESPACES = " \t\n\r\f\v"


class TaxopathParser:
    """Parse taxonomic path strings, or the ancestry of a taxon, into a :class:`Taxopath`.

    The elements of a taxonomic path string are separated by any of the characters in
    ``delimiters``. For example, with the default configuration the string

        Tax_1; Tax_2 ;;Tax_4;

    is parsed into ``["Tax_1", "Tax_2", "Tax_2", "Tax_4"]``: whitespace around the names is
    removed, the trailing delimiter is dropped, and the missing third element is filled with
    the one preceding it, a common convention of taxonomic databases for unspecified ranks.
    The first taxon of a path cannot be empty; such a string raises a
    :class:`~taxopath.errors.MalformedPathError`.

    Options are set via keywords or via the chainable ``set_*`` methods:

        parser = TaxopathParser().set_delimiters("|,").set_trim_whitespaces(False)
    """

    def __init__(
        self,
        delimiters: str = DEFAULT_DELIMITERS,
        trim_whitespaces: bool = True,
        remove_trailing_delimiter: bool = True,
    ):
        self.set_delimiters(delimiters)
        self._trim_whitespaces = trim_whitespaces
        self._remove_trailing_delimiter = remove_trailing_delimiter

    # Parsing

    def from_string(self, text: str) -> Taxopath:
        names = self._split(text)
        if self._remove_trailing_delimiter and text and text[-1] in self._delimiters:
            names.pop()
        if self._trim_whitespaces:
            names = [name.strip(WHITESPACES) for name in names]

        if names[0] == "":
            raise MalformedPathError(text)
        # runs of empty names all take the last non-empty one
        for i in range(1, len(names)):
            if names[i] == "":
                names[i] = names[i - 1]
        return Taxopath(names)

    def from_taxon(self, taxon: Taxon) -> Taxopath:
        names = []
        node: Taxon | None = taxon
        while node is not None:
            names.append(node.name)
            node = node.parent
        names.reverse()
        return Taxopath(names)

    def __call__(self, value: str | Taxon) -> Taxopath:
        if isinstance(value, str):
            return self.from_string(value)
        if isinstance(value, Taxon):
            return self.from_taxon(value)
        raise TypeError(
            f"Expected a taxonomic path string or a Taxon, got {type(value).__name__}."
        )

    def _split(self, text: str) -> list[str]:
        if self._pattern is None:
            return [text]
        return self._pattern.split(text)

    # Properties

    @property
    def delimiters(self) -> str:
        return self._delimiters

    def set_delimiters(self, value: str) -> "TaxopathParser":
        self._delimiters = value
        self._pattern = (
            re.compile("[" + "".join(re.escape(char) for char in value) + "]") if value else None
        )
        return self

    @property
    def trim_whitespaces(self) -> bool:
        return self._trim_whitespaces

    def set_trim_whitespaces(self, value: bool) -> "TaxopathParser":
        self._trim_whitespaces = value
        return self

    @property
    def remove_trailing_delimiter(self) -> bool:
        return self._remove_trailing_delimiter

    def set_remove_trailing_delimiter(self, value: bool) -> "TaxopathParser":
        self._remove_trailing_delimiter = value
        return self

    def copy(self) -> "TaxopathParser":
        return TaxopathParser(
            delimiters=self._delimiters,
            trim_whitespaces=self._trim_whitespaces,
            remove_trailing_delimiter=self._remove_trailing_delimiter,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaxopathParser):
            return NotImplemented
        return (
            self._delimiters == other._delimiters
            and self._trim_whitespaces == other._trim_whitespaces
            and self._remove_trailing_delimiter == other._remove_trailing_delimiter
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"TaxopathParser(delimiters={self._delimiters!r}, "
            f"trim_whitespaces={self._trim_whitespaces}, "
            f"remove_trailing_delimiter={self._remove_trailing_delimiter})"
        )
