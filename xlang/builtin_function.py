import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, TextIO

from xlang.errors import ScriptRuntimeError
from xlang.types import to_string


@dataclass
class BuiltinFunction:
    name: str
    arity: Optional[int]  # None means variadic
    fn: Callable[[List[Any]], Any]

    def __call__(self, args: List[Any]) -> Any:
        if self.arity is not None and len(args) != self.arity:
            raise ScriptRuntimeError(f"{self.name} expects {self.arity} arguments, got {len(args)}")
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"


def make_print(output: Optional[TextIO] = None) -> BuiltinFunction:
    """Build the `print` builtin writing to `output` (default: current stdout)."""
    def std_print(args: List[Any]) -> Any:
        stream = output if output is not None else sys.stdout
        stream.write(' '.join(to_string(a) for a in args) + '\n')
        return None

    return BuiltinFunction('print', None, std_print)


def default_builtins(output: Optional[TextIO] = None) -> Dict[str, Any]:
    return {'print': make_print(output)}
