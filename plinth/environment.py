from typing import Any, Dict, Iterator, Optional


class Environment:
    """The single, flat binding table of one program run.

    A later write to a name replaces the earlier value; there is no
    redeclaration error and no enclosing scope.
    """
    def __init__(self):
        self.values: Dict[str, Any] = {}

    def get(self, name: str) -> Optional[Any]:
        return self.values.get(name)

    def set(self, name: str, value: Any):
        self.values[name] = value

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)
