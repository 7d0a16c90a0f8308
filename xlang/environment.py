from typing import Any, Dict, Iterator, Mapping, Optional

from xlang.errors import ScriptRuntimeError


class Environment:
    """A flat mapping of identifiers to values.

    There is no parent chain: blocks share the environment of the statement
    list they belong to, and a function call works on a `snapshot()` of the
    caller's bindings.
    """
    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self.values: Dict[str, Any] = dict(values) if values else {}

    def get(self, name: str) -> Any:
        if name in self.values:
            return self.values[name]
        raise ScriptRuntimeError(f'Variable not found: {name}')

    def define(self, name: str, value: Any):
        self.values[name] = value

    def assign(self, name: str, value: Any):
        # assignment to an unbound name creates the binding
        self.values[name] = value

    def snapshot(self) -> 'Environment':
        return Environment(self.values)

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __repr__(self) -> str:
        return f"Environment({sorted(self.values)})"
