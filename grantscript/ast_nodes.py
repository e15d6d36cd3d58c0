"""
Abstract Syntax Tree node definitions for GrantScript.

The tree is a closed sum type: one dataclass per node kind, each tagged with
a `kind` field from NodeType. Consumers dispatch on `kind` (or on the class)
rather than on an open class hierarchy, so there is no shared base class and
no visitor interface. Nodes carry data only; the helpers at the bottom of
the module walk them structurally.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Iterator, List, Optional, Union


class NodeType(Enum):
    """Kind tags for every AST node."""

    # Statements
    PROGRAM = "Program"
    VAR_DECLARATION = "VarDeclaration"
    FUNC_DECLARATION = "FuncDeclaration"
    IF_STATEMENT = "IfStatement"
    FOR_STATEMENT = "ForStatement"
    TRY_CATCH_STATEMENT = "TryCatchStatement"

    # Expressions
    ASSIGNMENT_EXPR = "AssignmentExpr"
    MEMBER_EXPR = "MemberExpr"
    CALL_EXPR = "CallExpr"
    BINARY_EXPR = "BinaryExpr"

    # Literals
    PROPERTY = "Property"
    OBJECT_LITERAL = "ObjectLiteral"
    NUMERIC_LITERAL = "NumbericLiteral"
    IDENTIFIER = "Identifier"
    STRING_LITERAL = "StringLiteral"


# ============================================================================
# Literals / primary expressions
# ============================================================================

@dataclass
class Identifier:
    """A user-defined variable or symbol."""
    symbol: str
    kind: NodeType = field(default=NodeType.IDENTIFIER, init=False)


@dataclass
class NumericLiteral:
    """A numeric constant."""
    value: float
    kind: NodeType = field(default=NodeType.NUMERIC_LITERAL, init=False)


@dataclass
class StringLiteral:
    value: str
    kind: NodeType = field(default=NodeType.STRING_LITERAL, init=False)


@dataclass
class Property:
    """`key: value` inside an object literal; `value` is None for `{ key }` shorthand."""
    key: str
    value: Optional["Expression"] = None
    kind: NodeType = field(default=NodeType.PROPERTY, init=False)


@dataclass
class ObjectLiteral:
    properties: List[Property] = field(default_factory=list)
    kind: NodeType = field(default=NodeType.OBJECT_LITERAL, init=False)


# ============================================================================
# Expressions
# ============================================================================

@dataclass
class BinaryExpr:
    """
    An operation with two sides separated by an operator.

    Both sides can be any expression. `operator` is the value of a
    BINARY_OPERATOR token (+ - * / %) or a comparison spelling.
    """
    left: "Expression"
    right: "Expression"
    operator: str
    kind: NodeType = field(default=NodeType.BINARY_EXPR, init=False)


@dataclass
class CallExpr:
    caller: "Expression"
    args: List["Expression"] = field(default_factory=list)
    kind: NodeType = field(default=NodeType.CALL_EXPR, init=False)


@dataclass
class MemberExpr:
    """`object.property` or, when computed, `object[property]`."""
    object: "Expression"
    property: "Expression"
    computed: bool = False
    kind: NodeType = field(default=NodeType.MEMBER_EXPR, init=False)


@dataclass
class AssignmentExpr:
    assignee: "Expression"
    value: "Expression"
    kind: NodeType = field(default=NodeType.ASSIGNMENT_EXPR, init=False)


# ============================================================================
# Statements
# ============================================================================

@dataclass
class VarDeclaration:
    """`grant name = value;` or `entitle name = value;` (constant)."""
    constant: bool
    identifier: str
    value: Optional["Expression"] = None
    kind: NodeType = field(default=NodeType.VAR_DECLARATION, init=False)


@dataclass
class FuncDeclaration:
    name: str
    parameters: List[str] = field(default_factory=list)
    body: List["Statement"] = field(default_factory=list)
    kind: NodeType = field(default=NodeType.FUNC_DECLARATION, init=False)


@dataclass
class IfStatement:
    test: "Expression"
    body: List["Statement"] = field(default_factory=list)
    alternate: Optional[List["Statement"]] = None
    kind: NodeType = field(default=NodeType.IF_STATEMENT, init=False)


@dataclass
class ForStatement:
    """`loop (init; test; update) { body }`"""
    init: VarDeclaration
    test: "Expression"
    update: AssignmentExpr
    body: List["Statement"] = field(default_factory=list)
    kind: NodeType = field(default=NodeType.FOR_STATEMENT, init=False)


@dataclass
class TryCatchStatement:
    body: List["Statement"] = field(default_factory=list)
    alternate: List["Statement"] = field(default_factory=list)
    kind: NodeType = field(default=NodeType.TRY_CATCH_STATEMENT, init=False)


@dataclass
class Program:
    """Root node; one per source file."""
    body: List["Statement"] = field(default_factory=list)
    kind: NodeType = field(default=NodeType.PROGRAM, init=False)


Expression = Union[
    AssignmentExpr, MemberExpr, CallExpr, BinaryExpr,
    Identifier, NumericLiteral, StringLiteral, Property, ObjectLiteral,
]

Statement = Union[
    Program, VarDeclaration, FuncDeclaration, IfStatement, ForStatement,
    TryCatchStatement, Expression,
]

EXPRESSION_KINDS = frozenset({
    NodeType.ASSIGNMENT_EXPR,
    NodeType.MEMBER_EXPR,
    NodeType.CALL_EXPR,
    NodeType.BINARY_EXPR,
    NodeType.IDENTIFIER,
    NodeType.NUMERIC_LITERAL,
    NodeType.STRING_LITERAL,
    NodeType.PROPERTY,
    NodeType.OBJECT_LITERAL,
})

STATEMENT_KINDS = frozenset(NodeType)

NODE_CLASSES = {
    cls.__dataclass_fields__["kind"].default: cls
    for cls in (
        Program, VarDeclaration, FuncDeclaration, IfStatement, ForStatement,
        TryCatchStatement, AssignmentExpr, MemberExpr, CallExpr, BinaryExpr,
        Identifier, NumericLiteral, StringLiteral, Property, ObjectLiteral,
    )
}


def is_expression(node) -> bool:
    """True for nodes that produce a value at runtime."""
    return getattr(node, "kind", None) in EXPRESSION_KINDS


def is_statement(node) -> bool:
    """Every node kind is a statement; expressions are a subset."""
    return getattr(node, "kind", None) in STATEMENT_KINDS


def iter_children(node) -> Iterator[Statement]:
    """Yield the direct child nodes of `node` in field order."""
    for f in fields(node):
        if f.name == "kind":
            continue
        value = getattr(node, f.name)
        if isinstance(value, list):
            for item in value:
                if is_statement(item):
                    yield item
        elif is_statement(value):
            yield value


def walk(node) -> Iterator[Statement]:
    """Pre-order traversal of `node` and all of its descendants."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(list(iter_children(current))))
