"""Check Python files for declarations with too many parameters."""

import logging
from dataclasses import dataclass, field

from parameter_number.domain.config import RuleConfig
from parameter_number.domain.errors import ParseFailure
from parameter_number.domain.protocols import FileSystemProtocol, TreeGatewayProtocol
from parameter_number.domain.rules import Finding
from parameter_number.domain.rules.parameter_number import ParameterNumberRule
from parameter_number.domain.walker import TreeWalker

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Findings and unparseable files of one run."""

    findings: list[Finding] = field(default_factory=list)
    errors: list[ParseFailure] = field(default_factory=list)
    files_checked: int = 0

    def has_findings(self) -> bool:
        return bool(self.findings)


class CheckFilesUseCase:
    """Parse each file through the tree gateway and walk it with the rule."""

    def __init__(
        self,
        tree_gateway: TreeGatewayProtocol,
        filesystem: FileSystemProtocol,
        config: RuleConfig,
    ) -> None:
        self._tree_gateway = tree_gateway
        self._filesystem = filesystem
        self._rule = ParameterNumberRule(config=config)
        self._walker = TreeWalker([self._rule])

    def collect_files(self, paths: list[str]) -> list[str]:
        """Expand directories to their *.py files; keep order, drop duplicates."""
        files: list[str] = []
        for path in paths:
            if self._filesystem.is_directory(path):
                files.extend(self._filesystem.glob_python_files(path))
            elif self._filesystem.exists(path):
                files.append(path)
            else:
                logger.warning("Path does not exist: %s", path)
        return list(dict.fromkeys(files))

    def execute(self, paths: list[str]) -> CheckResult:
        result = CheckResult()
        for file_path in self.collect_files(paths):
            try:
                module = self._tree_gateway.parse_file(file_path)
            except ParseFailure as failure:
                logger.warning("Skipping %s", failure)
                result.errors.append(failure)
                continue
            tree = self._tree_gateway.to_tree(module)
            findings = self._walker.collect(tree)
            logger.debug("%s: %d finding(s)", file_path, len(findings))
            result.findings.extend(f.with_path(file_path) for f in findings)
            result.files_checked += 1
        return result
