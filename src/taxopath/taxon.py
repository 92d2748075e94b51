from typing import Iterator


class Taxon:
    """Node of a classification tree.

    Children are owned by their parent and keyed by name. Each child also keeps a reference
    to its parent, so any node of the tree is enough to recover its full lineage.
    """

    def __init__(self, name: str, rank: str | None = None):
        if not name:
            raise ValueError("Taxon names cannot be empty.")
        self.name = name
        self.rank = rank
        self._parent: Taxon | None = None
        self._children: dict[str, Taxon] = {}

    @property
    def parent(self) -> "Taxon | None":
        return self._parent

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def add_child(self, name: str, rank: str | None = None) -> "Taxon":
        """Return the child called ``name``, creating it if it does not exist yet.

        An existing child keeps its rank; ``rank`` is only used for new children.
        """
        child = self._children.get(name)
        if child is None:
            child = Taxon(name, rank)
            child._parent = self
            self._children[name] = child
        return child

    def __getitem__(self, name: str) -> "Taxon":
        return self._children[name]

    def __contains__(self, name: object) -> bool:
        return name in self._children

    def __iter__(self) -> Iterator["Taxon"]:
        return iter(self._children.values())

    def __len__(self) -> int:
        return len(self._children)

    def __str__(self) -> str:
        if self.rank is None:
            return self.name
        else:
            return f"{self.rank}: {self.name}"

    def __repr__(self) -> str:
        return f'Taxon("{str(self)}")'
