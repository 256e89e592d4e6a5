"""
Renders expression trees in parenthesized prefix form.

    1 + 2 * 3     ->  (+ 1 (* 2 3))
    (1 + 2) * 3   ->  (* (group (+ 1 2)) 3)
"""

from .ast_nodes import ASTVisitor, Expression, Literal, Unary, Binary, Grouping
from ..lexer.tokens import TokenKind


class ASTPrinter(ASTVisitor):

    def print(self, expr: Expression) -> str:
        return expr.accept(self)

    def visit_literal(self, node: Literal) -> str:
        if node.token.kind == TokenKind.STRING:
            return f'"{node.token.lexeme}"'
        return node.token.lexeme

    def visit_unary(self, node: Unary) -> str:
        return self._parenthesize(node.operator.lexeme, node.operand)

    def visit_binary(self, node: Binary) -> str:
        return self._parenthesize(node.operator.lexeme, node.left, node.right)

    def visit_grouping(self, node: Grouping) -> str:
        return self._parenthesize("group", node.inner)

    def _parenthesize(self, name: str, *exprs: Expression) -> str:
        parts = [name] + [expr.accept(self) for expr in exprs]
        return "(" + " ".join(parts) + ")"
