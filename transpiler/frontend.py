"""Frontend — tree-sitter Go CST -> typed syntax model."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

from . import constants
from .syntax import (
    Array,
    Assignment,
    BinaryOp,
    Block,
    Call,
    CommentGroup,
    Conditional,
    Decl,
    Dereference,
    Expr,
    ExpressionStatement,
    FieldDecl,
    Function,
    FunctionType,
    Identifier,
    ImportReference,
    Interface,
    Literal,
    LiteralKind,
    Named,
    OtherDecl,
    OtherExpr,
    OtherStmt,
    OtherType,
    Pointer,
    Qualified,
    QualifiedAccess,
    Return,
    Stmt,
    TranslationUnit,
    TypeExpr,
    UnaryOp,
    ValueGroup,
    ValueSpec,
    Variadic,
)

logger = logging.getLogger(__name__)


class Frontend(ABC):
    @abstractmethod
    def build(self, tree, source: bytes) -> TranslationUnit:
        ...


class GoFrontend(Frontend):
    """Builds a TranslationUnit from a tree-sitter Go tree.

    Constructs the translator supports get their own node class; every other
    CST node becomes an ``Other*`` node carrying its tree-sitter type so the
    emitters can report it.
    """

    COMMENT_TYPES = frozenset({constants.COMMENT_TYPE})
    NOISE_TYPES = frozenset({"package_clause", "empty_statement", "\n", ";"})

    LITERAL_KINDS: dict[str, LiteralKind] = {
        "int_literal": LiteralKind.INT,
        "float_literal": LiteralKind.FLOAT,
        "imaginary_literal": LiteralKind.IMAG,
        "rune_literal": LiteralKind.CHAR,
        "interpreted_string_literal": LiteralKind.STRING,
        "raw_string_literal": LiteralKind.STRING,
    }

    def __init__(self):
        self._source: bytes = b""
        self._DECL_DISPATCH: dict[str, Callable] = {
            "import_declaration": self._build_imports,
            "const_declaration": self._build_value_group,
            "var_declaration": self._build_value_group,
            "function_declaration": self._build_function,
            "method_declaration": self._build_function,
        }
        self._STMT_DISPATCH: dict[str, Callable] = {
            "expression_statement": self._build_expression_statement,
            "short_var_declaration": self._build_assignment,
            "assignment_statement": self._build_assignment,
            "if_statement": self._build_if,
            "return_statement": self._build_return,
            "block": self._build_block,
        }
        self._EXPR_DISPATCH: dict[str, Callable] = {
            "binary_expression": self._build_binary,
            "unary_expression": self._build_unary,
            "selector_expression": self._build_selector,
            "call_expression": self._build_call,
        }
        for node_type in constants.IDENTIFIER_TYPES | constants.PREDECLARED_IDENTIFIER_TYPES:
            self._EXPR_DISPATCH[node_type] = self._build_identifier
        for node_type in self.LITERAL_KINDS:
            self._EXPR_DISPATCH[node_type] = self._build_literal
        self._TYPE_DISPATCH: dict[str, Callable] = {
            "type_identifier": self._build_named_type,
            "identifier": self._build_named_type,
            "pointer_type": self._build_pointer_type,
            "slice_type": self._build_array_type,
            "array_type": self._build_array_type,
            "implicit_length_array_type": self._build_array_type,
            "interface_type": lambda node: Interface(pos=node.start_byte),
            "qualified_type": self._build_qualified_type,
            "function_type": lambda node: FunctionType(pos=node.start_byte),
        }

    # ── helpers ──────────────────────────────────────────────────

    def _node_text(self, node) -> str:
        return self._source[node.start_byte : node.end_byte].decode("utf-8")

    def _named(self, node) -> list:
        """Named children of *node*, without comments."""
        return [
            c for c in node.named_children if c.type not in self.COMMENT_TYPES
        ]

    def _expression_list(self, node) -> list[Expr]:
        if node is None:
            return []
        if node.type == "expression_list":
            return [self._build_expr(c) for c in self._named(node)]
        return [self._build_expr(node)]

    # ── entry point ──────────────────────────────────────────────

    def build(self, tree, source: bytes) -> TranslationUnit:
        self._source = source
        root = tree.root_node
        decls: list[Decl] = []
        for child in self._named(root):
            if child.type in self.NOISE_TYPES:
                continue
            decls.extend(self._build_decl(child))
        comments = self._collect_comments(root)
        logger.info(
            "Built translation unit: %d declarations, %d comment groups",
            len(decls),
            len(comments),
        )
        return TranslationUnit(decls=decls, comments=comments, source=source)

    # ── dispatchers ──────────────────────────────────────────────

    def _build_decl(self, node) -> list[Decl]:
        handler = self._DECL_DISPATCH.get(node.type)
        if handler:
            return handler(node)
        return [OtherDecl(pos=node.start_byte, node_type=node.type)]

    def _build_stmt(self, node) -> Stmt:
        handler = self._STMT_DISPATCH.get(node.type)
        if handler:
            return handler(node)
        return OtherStmt(pos=node.start_byte, node_type=node.type)

    def _build_expr(self, node) -> Expr:
        handler = self._EXPR_DISPATCH.get(node.type)
        if handler:
            return handler(node)
        return OtherExpr(pos=node.start_byte, node_type=node.type)

    def _build_type(self, node) -> TypeExpr:
        handler = self._TYPE_DISPATCH.get(node.type)
        if handler:
            return handler(node)
        return OtherType(pos=node.start_byte, node_type=node.type)

    # ── declarations ─────────────────────────────────────────────

    def _build_imports(self, node) -> list[Decl]:
        specs = []
        for child in self._named(node):
            if child.type == "import_spec_list":
                specs.extend(c for c in self._named(child) if c.type == "import_spec")
            elif child.type == "import_spec":
                specs.append(child)
        return [
            ImportReference(
                pos=spec.start_byte,
                path=self._node_text(spec.child_by_field_name("path")),
            )
            for spec in specs
        ]

    def _build_value_group(self, node) -> list[Decl]:
        is_const = node.type == "const_declaration"
        spec_nodes = []
        for child in self._named(node):
            if child.type in ("const_spec", "var_spec"):
                spec_nodes.append(child)
            elif child.type == "var_spec_list":
                spec_nodes.extend(c for c in self._named(child) if c.type == "var_spec")
        specs = [self._build_value_spec(s, is_const) for s in spec_nodes]
        return [ValueGroup(pos=node.start_byte, specs=specs)]

    def _build_value_spec(self, node, is_const: bool) -> ValueSpec:
        names = [
            self._node_text(n)
            for n in node.children_by_field_name("name")
            if n.is_named
        ]
        type_node = node.child_by_field_name("type")
        return ValueSpec(
            pos=node.start_byte,
            names=names,
            type=self._build_type(type_node) if type_node is not None else None,
            values=self._expression_list(node.child_by_field_name("value")),
            is_const=is_const,
        )

    def _build_function(self, node) -> list[Decl]:
        body_node = node.child_by_field_name("body")
        if body_node is None or node.child_by_field_name("type_parameters") is not None:
            return [OtherDecl(pos=node.start_byte, node_type=node.type)]
        receiver_node = node.child_by_field_name("receiver")
        result_node = node.child_by_field_name("result")
        if result_node is None:
            results = []
        elif result_node.type == "parameter_list":
            results = self._build_fields(result_node)
        else:
            results = [
                FieldDecl(pos=result_node.start_byte, type=self._build_type(result_node))
            ]
        return [
            Function(
                pos=node.start_byte,
                name=self._node_text(node.child_by_field_name("name")),
                receiver=self._build_fields(receiver_node) if receiver_node is not None else None,
                params=self._build_fields(node.child_by_field_name("parameters")),
                results=results,
                body=self._build_block(body_node),
            )
        ]

    def _build_fields(self, node) -> list[FieldDecl]:
        fields = []
        for child in self._named(node):
            names = [
                self._node_text(n)
                for n in child.children_by_field_name("name")
                if n.is_named
            ]
            type_node = child.child_by_field_name("type")
            if child.type == "variadic_parameter_declaration":
                typ = Variadic(pos=child.start_byte, inner=self._build_type(type_node))
            elif type_node is not None:
                typ = self._build_type(type_node)
            else:
                typ = OtherType(pos=child.start_byte, node_type=child.type)
            fields.append(FieldDecl(pos=child.start_byte, names=names, type=typ))
        return fields

    # ── statements ───────────────────────────────────────────────

    def _build_block(self, node) -> Block:
        statements = []
        for child in self._named(node):
            if child.type in self.NOISE_TYPES:
                continue
            if child.type == "statement_list":
                statements.extend(
                    self._build_stmt(c)
                    for c in self._named(child)
                    if c.type not in self.NOISE_TYPES
                )
            else:
                statements.append(self._build_stmt(child))
        return Block(pos=node.start_byte, statements=statements)

    def _build_expression_statement(self, node) -> Stmt:
        return ExpressionStatement(
            pos=node.start_byte, expr=self._build_expr(self._named(node)[0])
        )

    def _build_assignment(self, node) -> Stmt:
        if node.type == "short_var_declaration":
            operator = constants.DEFINE_OPERATOR
        else:
            operator = self._node_text(node.child_by_field_name("operator"))
        return Assignment(
            pos=node.start_byte,
            targets=self._expression_list(node.child_by_field_name("left")),
            operator=operator,
            values=self._expression_list(node.child_by_field_name("right")),
        )

    def _build_if(self, node) -> Stmt:
        init_node = node.child_by_field_name("initializer")
        alt_node = node.child_by_field_name("alternative")
        return Conditional(
            pos=node.start_byte,
            condition=self._build_expr(node.child_by_field_name("condition")),
            body=self._build_block(node.child_by_field_name("consequence")),
            alternative=self._build_stmt(alt_node) if alt_node is not None else None,
            init=self._build_stmt(init_node) if init_node is not None else None,
        )

    def _build_return(self, node) -> Stmt:
        results: list[Expr] = []
        for child in self._named(node):
            results.extend(self._expression_list(child))
        return Return(pos=node.start_byte, results=results)

    # ── expressions ──────────────────────────────────────────────

    def _build_identifier(self, node) -> Expr:
        return Identifier(pos=node.start_byte, name=self._node_text(node))

    def _build_literal(self, node) -> Expr:
        return Literal(
            pos=node.start_byte,
            literal_kind=self.LITERAL_KINDS[node.type],
            text=self._node_text(node),
        )

    def _build_binary(self, node) -> Expr:
        return BinaryOp(
            pos=node.start_byte,
            op=self._node_text(node.child_by_field_name("operator")),
            left=self._build_expr(node.child_by_field_name("left")),
            right=self._build_expr(node.child_by_field_name("right")),
        )

    def _build_unary(self, node) -> Expr:
        op = self._node_text(node.child_by_field_name("operator"))
        operand = self._build_expr(node.child_by_field_name("operand"))
        if op == constants.DEREFERENCE_OPERATOR:
            return Dereference(pos=node.start_byte, operand=operand)
        return UnaryOp(pos=node.start_byte, op=op, operand=operand)

    def _build_selector(self, node) -> Expr:
        field_node = node.child_by_field_name("field")
        return QualifiedAccess(
            pos=node.start_byte,
            base=self._build_expr(node.child_by_field_name("operand")),
            member=Identifier(pos=field_node.start_byte, name=self._node_text(field_node)),
        )

    def _build_call(self, node) -> Expr:
        if node.child_by_field_name("type_arguments") is not None:
            return OtherExpr(pos=node.start_byte, node_type="generic call_expression")
        args_node = node.child_by_field_name("arguments")
        return Call(
            pos=node.start_byte,
            callee=self._build_expr(node.child_by_field_name("function")),
            args=[self._build_expr(a) for a in self._named(args_node)]
            if args_node is not None
            else [],
        )

    # ── types ────────────────────────────────────────────────────

    def _build_named_type(self, node) -> TypeExpr:
        return Named(pos=node.start_byte, name=self._node_text(node))

    def _build_pointer_type(self, node) -> TypeExpr:
        return Pointer(pos=node.start_byte, inner=self._build_type(self._named(node)[0]))

    def _build_array_type(self, node) -> TypeExpr:
        return Array(
            pos=node.start_byte,
            inner=self._build_type(node.child_by_field_name("element")),
        )

    def _build_qualified_type(self, node) -> TypeExpr:
        package_node = node.child_by_field_name("package")
        name_node = node.child_by_field_name("name")
        return Qualified(
            pos=node.start_byte,
            base=Named(pos=package_node.start_byte, name=self._node_text(package_node)),
            member=Named(pos=name_node.start_byte, name=self._node_text(name_node)),
        )

    # ── comments ─────────────────────────────────────────────────

    @staticmethod
    def _leaves(node):
        stack = [node]
        while stack:
            current = stack.pop()
            if current.child_count == 0:
                yield current
            else:
                stack.extend(reversed(current.children))

    def _collect_comments(self, root) -> list[CommentGroup]:
        """Group comments that follow each other with no token in between and
        at most one line break between them."""
        groups: list[CommentGroup] = []
        lines: list[str] = []
        start = 0
        last_row = -1
        after_comment = False
        for leaf in self._leaves(root):
            if leaf.type not in self.COMMENT_TYPES:
                if leaf.end_byte > leaf.start_byte:
                    after_comment = False
                continue
            text = self._node_text(leaf).replace("\r", "")
            if after_comment and leaf.start_point[0] - last_row <= 1:
                lines.append(text)
            else:
                if lines:
                    groups.append(CommentGroup(pos=start, lines=lines))
                lines = [text]
                start = leaf.start_byte
            last_row = leaf.end_point[0]
            after_comment = True
        if lines:
            groups.append(CommentGroup(pos=start, lines=lines))
        return groups


def get_frontend(language: str) -> Frontend:
    if language == constants.LANGUAGE:
        return GoFrontend()
    raise ValueError(f"Unsupported language: {language}")
