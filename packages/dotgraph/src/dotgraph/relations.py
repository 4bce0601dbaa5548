class Relations:
    """Parent/child membership of nodes and subgraphs, indexed both ways.

    Buckets are ordered by insertion and dropped once empty, so removing a
    relation that was just added leaves the index exactly as it was.
    """

    def __init__(self):
        self._parent_to_children: dict[str, dict[str, None]] = {}
        self._child_to_parents: dict[str, dict[str, None]] = {}

    def add(self, parent: str, child: str) -> None:
        self._parent_to_children.setdefault(parent, {})[child] = None
        self._child_to_parents.setdefault(child, {})[parent] = None

    def remove(self, parent: str, child: str) -> None:
        _discard(self._parent_to_children, parent, child)
        _discard(self._child_to_parents, child, parent)

    def contains(self, parent: str, child: str) -> bool:
        return child in self._parent_to_children.get(parent, {})

    def children(self, parent: str) -> list[str]:
        return list(self._parent_to_children.get(parent, ()))

    def parents(self, child: str) -> list[str]:
        return list(self._child_to_parents.get(child, ()))

    def to_dict(self) -> dict[str, list[str]]:
        return {parent: list(children) for parent, children in self._parent_to_children.items()}


def _discard(index: dict[str, dict[str, None]], key: str, member: str) -> None:
    bucket = index.get(key)
    if bucket is None:
        return
    bucket.pop(member, None)
    if not bucket:
        del index[key]
