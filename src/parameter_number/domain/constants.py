"""Constants shared by the domain, checker and CLI."""

RULE_PREFIX = "parameter-number."

RULE_CODE = "R9701"
RULE_SYMBOL = "too-many-parameters"

DEFAULT_MAX_PARAMETERS = 7

# Override annotation, simple and fully-qualified spelling
OVERRIDE = "Override"
FQ_OVERRIDE = "java.lang." + OVERRIDE
DEFAULT_OVERRIDE_NAMES: tuple[str, ...] = (OVERRIDE, FQ_OVERRIDE)

# typing.override (PEP 698) as written in Python sources
PYTHON_OVERRIDE_NAMES: tuple[str, ...] = (
    "override",
    "typing.override",
    "typing_extensions.override",
)

# Fallback when the message catalog has no entry for RULE_CODE
DEFAULT_MESSAGE_TEMPLATE = "More than %s parameters (found %s)."

CONFIG_SECTION = "parameter-number"
