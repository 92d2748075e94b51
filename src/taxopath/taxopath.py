from dataclasses import dataclass
from typing import Iterable, Iterator, overload


@dataclass(frozen=True, init=False)
class Taxopath:
    """Ordered, root-first sequence of taxon names.

    Usually obtained from a :class:`~taxopath.parser.TaxopathParser`, either by parsing a
    taxonomic path string or by walking the ancestry of a :class:`~taxopath.taxon.Taxon`.
    """

    names: tuple[str, ...]

    def __init__(self, names: Iterable[str]):
        names = tuple(names)
        if len(names) == 0:
            raise ValueError("A Taxopath needs at least one taxon name.")
        if names[0] == "":
            raise ValueError("The first taxon name of a Taxopath cannot be empty.")
        object.__setattr__(self, "names", names)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[str, ...]: ...

    def __getitem__(self, index):
        return self.names[index]

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    @property
    def leaf(self) -> str:
        return self.names[-1]

    def to_string(self, delimiter: str = ";") -> str:
        return delimiter.join(self.names)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Taxopath({list(self.names)!r})"
