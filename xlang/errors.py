from typing import Optional


class ScriptError(Exception):
    """Base class for every error raised by the xlang pipeline."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LexicalError(ScriptError):
    """Unterminated string or illegal character in the source text."""
    def __init__(self, message: str, line: int, column: int):
        super().__init__(f"{message} at line {line} and column {column}")
        self.line = line
        self.column = column


class ScriptSyntaxError(ScriptError):
    """Grammar mismatch reported at the offending token."""
    def __init__(self, message: str, line: int, column: int, lexeme: Optional[str] = None):
        where = 'at end' if not lexeme else f"at '{lexeme}'"
        super().__init__(f"[line {line}:{column}] Error {where}: {message}")
        self.expected = message
        self.line = line
        self.column = column
        self.lexeme = lexeme


class ScriptRuntimeError(ScriptError):
    """Failure while evaluating an AST."""
