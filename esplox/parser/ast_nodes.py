"""
Abstract Syntax Tree node definitions for EspLox expressions.

The node set is closed: Literal, Unary, Binary and Grouping. Nodes are
immutable, compare by structure, own their children outright (no node is
ever shared between two parents) and support the visitor pattern.

Author: xwest
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List

from ..lexer.tokens import Token


class ASTNodeType(Enum):
    """Enumeration of all expression node types."""
    LITERAL = "Literal"
    UNARY = "Unary"
    BINARY = "Binary"
    GROUPING = "Grouping"


class ASTVisitor(ABC):
    """Visitor interface with one method per node type."""

    @abstractmethod
    def visit_literal(self, node: "Literal") -> Any:
        pass

    @abstractmethod
    def visit_unary(self, node: "Unary") -> Any:
        pass

    @abstractmethod
    def visit_binary(self, node: "Binary") -> Any:
        pass

    @abstractmethod
    def visit_grouping(self, node: "Grouping") -> Any:
        pass


class Expression(ABC):
    """Base class for all expression nodes."""

    node_type: ASTNodeType

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List["Expression"]:
        """Get all child nodes, left to right."""
        pass

    def literals(self) -> Iterator["Literal"]:
        """Yield literal leaves in source order."""
        for child in self.children():
            yield from child.literals()


@dataclass(frozen=True)
class Literal(Expression):
    """A literal value: number, string, verdadero, falso or nada."""
    token: Token

    node_type = ASTNodeType.LITERAL

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_literal(self)

    def children(self) -> List[Expression]:
        return []

    def literals(self) -> Iterator["Literal"]:
        yield self

    @property
    def value(self) -> Any:
        return self.token.value


@dataclass(frozen=True)
class Unary(Expression):
    """Prefix operation: !x or -x."""
    operator: Token
    operand: Expression

    node_type = ASTNodeType.UNARY

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_unary(self)

    def children(self) -> List[Expression]:
        return [self.operand]


@dataclass(frozen=True)
class Binary(Expression):
    """Infix operation between two operands."""
    left: Expression
    operator: Token
    right: Expression

    node_type = ASTNodeType.BINARY

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_binary(self)

    def children(self) -> List[Expression]:
        return [self.left, self.right]


@dataclass(frozen=True)
class Grouping(Expression):
    """Parenthesized expression."""
    inner: Expression

    node_type = ASTNodeType.GROUPING

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_grouping(self)

    def children(self) -> List[Expression]:
        return [self.inner]
