"""Unit tests for ParameterNumberChecker (pylint plugin, R9701)."""

import io
import unittest
from contextlib import redirect_stderr

import astroid

from parameter_number.infrastructure.gateways.astroid_gateway import AstroidTreeGateway
from parameter_number.infrastructure.services.message_catalog import MessageCatalog
from parameter_number.use_cases.checks.parameter_number import ParameterNumberChecker
from tests.linter_test_utils import run_checker
from tests.unit.checker_test_utils import CheckerTestCase, create_mock_linter


def _checker(**options) -> ParameterNumberChecker:
    checker = ParameterNumberChecker(
        create_mock_linter(**options),
        tree_gateway=AstroidTreeGateway(),
        registry=MessageCatalog().get_registry(),
    )
    checker.open()
    return checker


def _first_method(source: str) -> astroid.nodes.FunctionDef:
    return astroid.parse(source).body[0].body[0]


class TestParameterNumberChecker(unittest.TestCase, CheckerTestCase):

    def test_msgs_come_from_registry(self) -> None:
        checker = _checker()
        self.assertEqual(
            checker.msgs["R9701"][:2],
            ("More than %s parameters (found %s).", "too-many-parameters"),
        )

    def test_msgs_fall_back_without_registry(self) -> None:
        checker = ParameterNumberChecker(
            create_mock_linter(), tree_gateway=AstroidTreeGateway(), registry={}
        )
        self.assertEqual(checker.msgs["R9701"][1], "too-many-parameters")

    def test_invalid_max_option_stops_run_with_message(self) -> None:
        checker = ParameterNumberChecker(
            create_mock_linter(max_parameters=0),
            tree_gateway=AstroidTreeGateway(),
            registry={},
        )
        stderr = io.StringIO()
        with redirect_stderr(stderr), self.assertRaises(SystemExit) as ctx:
            checker.open()
        self.assertEqual(ctx.exception.code, 32)
        self.assertIn("parameter-number: invalid configuration", stderr.getvalue())
        self.assertIn("max must be a positive integer", stderr.getvalue())

    def test_seven_parameters_is_clean(self) -> None:
        checker = _checker()
        checker.visit_functiondef(astroid.extract_node("def build(a, b, c, d, e, f, g): pass"))
        self.assertNoMessages(checker)

    def test_eight_parameters_reported_at_name(self) -> None:
        checker = _checker()
        node = astroid.extract_node("def build(a, b, c, d, e, f, g, h): pass")
        checker.visit_functiondef(node)
        call = self.assertAddsMessage(checker, "R9701", node=node, args=(7, 8))
        c_args = call[0]
        # msgid, line, node, args, confidence, col_offset, end_lineno, end_col_offset
        self.assertEqual(c_args[1], 1)
        self.assertEqual(c_args[5], 4)
        self.assertEqual(c_args[7], 9)

    def test_self_not_counted(self) -> None:
        checker = _checker()
        node = _first_method(
            "class A:\n    def run(self, a, b, c, d, e, f, g):\n        pass\n"
        )
        checker.visit_functiondef(node)
        self.assertNoMessages(checker)

    def test_max_parameters_option(self) -> None:
        checker = _checker(max_parameters=2)
        node = astroid.extract_node("def build(a, b, c): pass")
        checker.visit_functiondef(node)
        self.assertAddsMessage(checker, "R9701", node=node, args=(2, 3))

    def test_override_reported_by_default(self) -> None:
        checker = _checker(max_parameters=1)
        node = _first_method(
            "class A:\n    @override\n    def run(self, a, b):\n        pass\n"
        )
        checker.visit_functiondef(node)
        self.assertAddsMessage(checker, "R9701", node=node, args=(1, 2))

    def test_override_ignored_when_option_set(self) -> None:
        checker = _checker(max_parameters=1, ignore_overridden_methods=True)
        for decorator in ("override", "typing.override", "typing_extensions.override"):
            node = _first_method(
                f"class A:\n    @{decorator}\n    def run(self, a, b):\n        pass\n"
            )
            checker.visit_functiondef(node)
        self.assertNoMessages(checker)

    def test_other_decorator_not_exempt(self) -> None:
        checker = _checker(max_parameters=1, ignore_overridden_methods=True)
        node = _first_method(
            "class A:\n    @property\n    def run(self, a, b):\n        pass\n"
        )
        checker.visit_functiondef(node)
        self.assertAddsMessage(checker, "R9701", node=node)

    def test_custom_override_decorators(self) -> None:
        checker = _checker(
            max_parameters=1,
            ignore_overridden_methods=True,
            override_decorators=["overrides"],
        )
        node = _first_method(
            "class A:\n    @overrides\n    def run(self, a, b):\n        pass\n"
        )
        checker.visit_functiondef(node)
        self.assertNoMessages(checker)

    def test_async_function_dispatch(self) -> None:
        checker = _checker(max_parameters=1)
        node = astroid.extract_node("async def fetch(a, b): pass")
        checker.visit_asyncfunctiondef(node)
        self.assertAddsMessage(checker, "R9701", node=node, args=(1, 2))


class TestParameterNumberCheckerWalk(unittest.TestCase):
    """Whole-module walk the way pylint drives the checker."""

    def _run(self, code: str, **options) -> list:
        return run_checker(
            ParameterNumberChecker,
            code,
            options=options,
            tree_gateway=AstroidTreeGateway(),
            registry=MessageCatalog().get_registry(),
        )

    def test_reports_each_offending_declaration(self) -> None:
        code = (
            "def small(a):\n"
            "    pass\n"
            "\n"
            "class Service:\n"
            "    def __init__(self, a, b, c):\n"
            "        pass\n"
            "\n"
            "    async def handle(self, a, b, c, d):\n"
            "        def inner(x, y, z):\n"
            "            pass\n"
        )
        messages = self._run(code, max_parameters=2)
        self.assertEqual(
            messages,
            [
                ("R9701", 5, (2, 3)),
                ("R9701", 8, (2, 4)),
                ("R9701", 9, (2, 3)),
            ],
        )

    def test_lambda_is_not_checked(self) -> None:
        self.assertEqual(self._run("f = lambda a, b, c: a\n", max_parameters=1), [])
