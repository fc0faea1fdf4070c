"""Pure message-building from a registry dict. No I/O or infrastructure imports."""

from collections.abc import Mapping
from typing import cast

from parameter_number.domain.constants import DEFAULT_MESSAGE_TEMPLATE, RULE_PREFIX
from parameter_number.domain.registry_types import RuleRegistryEntry
from parameter_number.domain.rules import Finding


class RuleMsgBuilder:
    """Builds Pylint msgs dicts and rendered messages from a registry mapping."""

    @staticmethod
    def get_entry(
        registry: Mapping[str, RuleRegistryEntry], rule_code: str
    ) -> RuleRegistryEntry | None:
        """Return registry entry for a rule by code or symbol."""
        entry = registry.get(f"{RULE_PREFIX}{rule_code}")
        if isinstance(entry, dict):
            return cast(RuleRegistryEntry, dict(entry))
        for rid, e in registry.items():
            if not rid.startswith(RULE_PREFIX):
                continue
            if isinstance(e, dict) and e.get("symbol") == rule_code:
                return cast(RuleRegistryEntry, dict(e))
        return None

    @staticmethod
    def build_msgs_for_codes(
        registry: Mapping[str, RuleRegistryEntry], codes: list[str]
    ) -> dict[str, tuple[str, str, str]]:
        """Build Pylint msgs dict from a registry mapping for given rule codes.

        Registry keys are e.g. 'parameter-number.R9701'; values are RuleRegistryEntry dicts.
        Returns { code: (message_template, symbol, description) } for checker.msgs.
        """
        result: dict[str, tuple[str, str, str]] = {}
        for code in codes:
            entry = RuleMsgBuilder.get_entry(registry, code)
            if entry and entry.get("message_template"):
                msg = entry["message_template"]
                symbol = entry.get("symbol") or code
                desc = (
                    entry.get("display_name")
                    or entry.get("short_description")
                    or code
                )
                result[code] = (str(msg), str(symbol), str(desc))
        return result

    @staticmethod
    def get_template(
        registry: Mapping[str, RuleRegistryEntry], rule_code: str, locale: str | None = None
    ) -> str:
        """Template for a rule in the requested locale, falling back to the default text."""
        entry = RuleMsgBuilder.get_entry(registry, rule_code)
        if not entry:
            return DEFAULT_MESSAGE_TEMPLATE
        if locale:
            translations = entry.get("translations") or {}
            translated = translations.get(locale) or translations.get(locale.split("_")[0])
            if translated:
                return str(translated)
        return str(entry.get("message_template") or DEFAULT_MESSAGE_TEMPLATE)

    @staticmethod
    def format_message(
        registry: Mapping[str, RuleRegistryEntry], finding: Finding, locale: str | None = None
    ) -> str:
        """Render a finding's message with its arguments."""
        template = RuleMsgBuilder.get_template(registry, finding.code, locale)
        return template % finding.message_args
