from dataclasses import dataclass
from typing import Any


@dataclass
class BuiltinFunction:
    """An interpreter-provided operation reachable through `BuiltinCall`.

    `fn` receives an iterator over the evaluated arguments. Arguments are
    evaluated as the function consumes them, so side effects interleave
    with evaluation in argument order.
    """
    name: str
    fn: Any

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"
