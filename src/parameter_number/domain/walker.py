"""Generic tree walker: dispatches nodes to rules by kind."""

from collections.abc import Iterable
from typing import Protocol

from parameter_number.domain.rules import Finding, KindDispatchedRule
from parameter_number.domain.syntax import SyntaxNode, TokenType


class ReportingSink(Protocol):
    """Receives findings as they are produced."""

    def report(self, finding: Finding) -> None:
        ...


class FindingCollector(ReportingSink):
    """Sink that keeps findings in arrival order."""

    def __init__(self) -> None:
        self.findings: list[Finding] = []

    def report(self, finding: Finding) -> None:
        self.findings.append(finding)


class TreeWalker:
    """
    Depth-first pre-order walk. Each node is handed to every registered rule
    whose ``applicable_kinds()`` contains the node's kind, in registration order.
    """

    def __init__(self, rules: Iterable[KindDispatchedRule]) -> None:
        self._dispatch: dict[TokenType, list[KindDispatchedRule]] = {}
        for rule in rules:
            for kind in rule.applicable_kinds():
                self._dispatch.setdefault(kind, []).append(rule)

    def walk(self, root: SyntaxNode, sink: ReportingSink) -> None:
        for node in root.walk():
            for rule in self._dispatch.get(node.kind, ()):
                finding = rule.evaluate(node)
                if finding is not None:
                    sink.report(finding)

    def collect(self, root: SyntaxNode) -> list[Finding]:
        """Walk and return the findings instead of streaming them."""
        collector = FindingCollector()
        self.walk(root, collector)
        return collector.findings
