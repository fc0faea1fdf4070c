"""Parameter number rule (R9701): too many parameters on a method or constructor."""

import dataclasses
from typing import ClassVar

from parameter_number.domain.annotations import AnnotationResolver, TreeAnnotationResolver
from parameter_number.domain.config import RuleConfig
from parameter_number.domain.constants import RULE_CODE, RULE_SYMBOL
from parameter_number.domain.errors import StructuralInvariantViolation
from parameter_number.domain.rules import Checkable, Finding
from parameter_number.domain.syntax import SyntaxNode, TokenType


class ParameterNumberRule(Checkable):
    """
    Rule for R9701: a method or constructor declares more parameters than allowed.

    The default maximum is 7. With ``ignore_overridden`` set, declarations
    annotated ``@Override`` (or ``@java.lang.Override``) are exempt.
    """

    code: str = RULE_CODE
    description: str = "Parameter number: method or constructor has too many parameters."
    message_key: str = RULE_SYMBOL

    APPLICABLE_KINDS: ClassVar[frozenset[TokenType]] = frozenset(
        {TokenType.METHOD_DEF, TokenType.CTOR_DEF}
    )

    def __init__(
        self,
        config: RuleConfig | None = None,
        annotation_resolver: AnnotationResolver | None = None,
    ) -> None:
        self._config = config if config is not None else RuleConfig()
        self._resolver = annotation_resolver or TreeAnnotationResolver()

    @property
    def config(self) -> RuleConfig:
        return self._config

    def configure(self, max_parameters: int, ignore_overridden: bool) -> None:
        """Replace the configuration. Call before the walk, never during it."""
        self._config = dataclasses.replace(
            self._config, max_parameters=max_parameters, ignore_overridden=ignore_overridden
        )

    def applicable_kinds(self) -> frozenset[TokenType]:
        return self.APPLICABLE_KINDS

    def evaluate(self, node: SyntaxNode, config: RuleConfig | None = None) -> Finding | None:
        """Return a finding when the declaration exceeds the maximum, else None."""
        cfg = config if config is not None else self._config
        count = self.count_parameters(node)
        if count <= cfg.max_parameters:
            return None
        if cfg.ignore_overridden and self._is_overridden(node, cfg):
            return None
        name = node.find_first_token(TokenType.IDENT)
        if name is None or not name.has_position:
            raise StructuralInvariantViolation(
                f"{node.kind.value} has no positioned name identifier", kind=node.kind
            )
        return Finding(
            code=self.code,
            message_key=self.message_key,
            line=name.line,  # type: ignore[arg-type]
            column=name.column,  # type: ignore[arg-type]
            max_parameters=cfg.max_parameters,
            count=count,
            name=name.text,
        )

    def check(self, node: SyntaxNode) -> list[Finding]:
        """Check a declaration node. Returns at most one finding."""
        if node.kind not in self.APPLICABLE_KINDS:
            return []
        finding = self.evaluate(node)
        return [finding] if finding is not None else []

    def count_parameters(self, node: SyntaxNode) -> int:
        """Number of PARAMETER_DEF children of the declaration's parameter list."""
        params = node.find_first_token(TokenType.PARAMETERS)
        if params is None:
            raise StructuralInvariantViolation(
                f"{node.kind.value} has no parameter list", kind=node.kind
            )
        return params.get_child_count(TokenType.PARAMETER_DEF)

    def _is_overridden(self, node: SyntaxNode, cfg: RuleConfig) -> bool:
        # Either spelling counts; which one is valid in scope is not checked
        return any(
            self._resolver.contains_annotation(node, name) for name in cfg.override_names
        )
