"""Unit tests for TreeWalker kind dispatch."""

import unittest
from unittest.mock import MagicMock

from parameter_number.domain.rules import Finding
from parameter_number.domain.rules.parameter_number import ParameterNumberRule
from parameter_number.domain.syntax import SyntaxNode, TokenType
from parameter_number.domain.walker import FindingCollector, TreeWalker
from tests.unit.tree_builders import declaration, ident


def _unit(*declarations: SyntaxNode) -> SyntaxNode:
    klass = SyntaxNode.branch(TokenType.CLASS_DEF, ident("Foo"), *declarations)
    return SyntaxNode.branch(TokenType.COMPILATION_UNIT, klass)


class TestTreeWalker(unittest.TestCase):

    def test_reports_only_violating_declarations(self) -> None:
        tree = _unit(
            declaration(3, name="small", line=2),
            declaration(8, name="large", line=5),
            declaration(9, name="Foo", kind=TokenType.CTOR_DEF, line=9),
        )
        findings = TreeWalker([ParameterNumberRule()]).collect(tree)
        self.assertEqual([f.name for f in findings], ["large", "Foo"])
        self.assertEqual([f.line for f in findings], [5, 9])

    def test_dispatches_by_kind_only(self) -> None:
        rule = MagicMock()
        rule.applicable_kinds.return_value = frozenset({TokenType.CTOR_DEF})
        rule.evaluate.return_value = None
        ctor = declaration(1, kind=TokenType.CTOR_DEF)
        TreeWalker([rule]).walk(_unit(declaration(1), ctor), FindingCollector())
        rule.evaluate.assert_called_once_with(ctor)

    def test_streams_to_sink(self) -> None:
        finding = Finding(
            code="R9701", message_key="too-many-parameters",
            line=1, column=0, max_parameters=7, count=8,
        )
        rule = MagicMock()
        rule.applicable_kinds.return_value = frozenset({TokenType.METHOD_DEF})
        rule.evaluate.return_value = finding
        sink = MagicMock()
        TreeWalker([rule]).walk(_unit(declaration(8), declaration(8)), sink)
        self.assertEqual(sink.report.call_count, 2)
        sink.report.assert_called_with(finding)

    def test_rules_run_in_registration_order(self) -> None:
        calls: list[str] = []
        rules = []
        for label in ("first", "second"):
            rule = MagicMock()
            rule.applicable_kinds.return_value = frozenset({TokenType.METHOD_DEF})
            rule.evaluate.side_effect = lambda node, label=label: calls.append(label)
            rules.append(rule)
        TreeWalker(rules).collect(_unit(declaration(1)))
        self.assertEqual(calls, ["first", "second"])

    def test_empty_tree(self) -> None:
        root = SyntaxNode.branch(TokenType.COMPILATION_UNIT)
        self.assertEqual(TreeWalker([ParameterNumberRule()]).collect(root), [])
