"""Renders a CheckResult as text lines or JSON."""

import json
from collections.abc import Mapping

from parameter_number.domain.registry_types import RuleRegistryEntry
from parameter_number.domain.rule_msgs import RuleMsgBuilder
from parameter_number.domain.rules import Finding
from parameter_number.use_cases.check_files import CheckResult


class FindingReporter:
    """Formats findings with messages from the rule registry."""

    def __init__(
        self, registry: Mapping[str, RuleRegistryEntry], locale: str | None = None
    ) -> None:
        self._registry = registry
        self._locale = locale

    def message(self, finding: Finding) -> str:
        return RuleMsgBuilder.format_message(self._registry, finding, self._locale)

    def format_line(self, finding: Finding) -> str:
        """path:line:column: CODE symbol message"""
        return f"{finding.location}: {finding.code} {finding.message_key} {self.message(finding)}"

    def render_text(self, result: CheckResult) -> str:
        lines = [self.format_line(f) for f in result.findings]
        lines.append(
            f"{len(result.findings)} finding(s) in {result.files_checked} file(s)"
        )
        return "\n".join(lines)

    def render_json(self, result: CheckResult) -> str:
        payload = [
            {
                "path": f.path,
                "line": f.line,
                "column": f.column,
                "code": f.code,
                "symbol": f.message_key,
                "name": f.name,
                "max": f.max_parameters,
                "count": f.count,
                "message": self.message(f),
            }
            for f in result.findings
        ]
        return json.dumps(payload, indent=2)

    def render(self, result: CheckResult, output_format: str = "text") -> str:
        if output_format == "json":
            return self.render_json(result)
        return self.render_text(result)
