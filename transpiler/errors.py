"""Translation error taxonomy.

Every error is terminal for the translation run that raised it: the first
failing node aborts the whole unit and nothing retries.
"""

from __future__ import annotations


class TranslationError(Exception):
    """Base class for all translation failures.

    ``str()`` renders as ``"line N: message"`` when the line is known.
    """

    def __init__(self, message: str, *, line: int = 0, kind: str = "", pos: int = -1):
        self.message = message
        self.line = line
        self.kind = kind
        self.pos = pos
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line:
            return f"line {self.line}: {self.message}"
        return self.message


class ParseError(TranslationError):
    """The source text is not syntactically valid Go."""


class UnsupportedConstruct(TranslationError):
    """A declaration, statement, expression or type outside the subset."""


class UnsupportedArity(TranslationError):
    """Too many names, values, results or receivers for the subset."""


class UnsupportedType(TranslationError):
    """An explicit type or literal kind with no target spelling."""


class UnsupportedInitializer(TranslationError):
    """A value-spec initializer that is not a direct literal."""
