"""Typed syntax model — the closed set of node variants the translator sees.

The frontend turns a tree-sitter Go tree into these nodes once per
translation unit; nothing mutates them afterwards. Each category
(declaration, statement, expression, type) has one class per supported
variant plus an ``Other*`` class that records any construct outside the
subset so the emitters can reject it with its position.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class LiteralKind(str, Enum):
    INT = "INT"
    FLOAT = "FLOAT"
    IMAG = "IMAG"
    CHAR = "CHAR"
    STRING = "STRING"


class Node(BaseModel):
    """A syntax node starting at byte offset ``pos`` of the source."""

    model_config = ConfigDict(frozen=True)

    pos: int

    @property
    def kind(self) -> str:
        return type(self).__name__


# ── type expressions ─────────────────────────────────────────────


class TypeExpr(Node):
    pass


class Named(TypeExpr):
    name: str


class Pointer(TypeExpr):
    inner: TypeExpr


class Array(TypeExpr):
    inner: TypeExpr


class Variadic(TypeExpr):
    inner: TypeExpr


class Interface(TypeExpr):
    pass


class Qualified(TypeExpr):
    base: TypeExpr
    member: Named


class FunctionType(TypeExpr):
    pass


class OtherType(TypeExpr):
    node_type: str

    @property
    def kind(self) -> str:
        return self.node_type


# ── expressions ──────────────────────────────────────────────────


class Expr(Node):
    pass


class Literal(Expr):
    literal_kind: LiteralKind
    text: str


class Identifier(Expr):
    name: str


class BinaryOp(Expr):
    op: str
    left: Expr
    right: Expr


class UnaryOp(Expr):
    op: str
    operand: Expr


class QualifiedAccess(Expr):
    base: Expr
    member: Identifier


class Dereference(Expr):
    operand: Expr


class Call(Expr):
    callee: Expr
    args: list[Expr] = []


class OtherExpr(Expr):
    node_type: str

    @property
    def kind(self) -> str:
        return self.node_type


# ── statements ───────────────────────────────────────────────────


class Stmt(Node):
    pass


class Block(Stmt):
    statements: list[Stmt] = []


class ExpressionStatement(Stmt):
    expr: Expr


class Assignment(Stmt):
    targets: list[Expr]
    operator: str
    values: list[Expr]


class Conditional(Stmt):
    condition: Expr
    body: Block
    alternative: Stmt | None = None
    init: Stmt | None = None


class Return(Stmt):
    results: list[Expr] = []


class OtherStmt(Stmt):
    node_type: str

    @property
    def kind(self) -> str:
        return self.node_type


# ── declarations ─────────────────────────────────────────────────


class FieldDecl(Node):
    """A parameter, receiver or result field: zero or more names, one type."""

    names: list[str] = []
    type: TypeExpr


class ValueSpec(Node):
    names: list[str]
    type: TypeExpr | None = None
    values: list[Expr] = []
    is_const: bool = False


class Decl(Node):
    pass


class ValueGroup(Decl):
    specs: list[ValueSpec] = []


class ImportReference(Decl):
    path: str


class Function(Decl):
    name: str
    receiver: list[FieldDecl] | None = None
    params: list[FieldDecl] = []
    results: list[FieldDecl] = []
    body: Block


class OtherDecl(Decl):
    node_type: str

    @property
    def kind(self) -> str:
        return self.node_type


# ── translation unit ─────────────────────────────────────────────


class CommentGroup(Node):
    """Adjacent source comments, each line kept verbatim with its markers."""

    lines: list[str]


class TranslationUnit(BaseModel):
    model_config = ConfigDict(frozen=True)

    decls: list[Decl] = []
    comments: list[CommentGroup] = []
    source: bytes = b""
