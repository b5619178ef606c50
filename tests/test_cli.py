"""Tests for the command line entry point (polymer_init.cli).

Generator discovery is patched out; each test registers what it needs on a
real GeneratorEnvironment.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from polymer_init import cli
from polymer_init.config import InitConfig
from polymer_init.init import GeneratorEnvironment, TemplateNotFoundError

pytestmark = pytest.mark.unit


@pytest.fixture
def env() -> GeneratorEnvironment:
    environment = GeneratorEnvironment()
    with patch.object(GeneratorEnvironment, "lookup", return_value=[]), patch(
        "polymer_init.cli.GeneratorEnvironment", return_value=environment
    ):
        yield environment


class TestParser:
    def test_template_optional(self):
        args = cli.build_parser().parse_args([])
        assert args.template is None
        assert args.list_templates is False

    def test_template_and_list(self):
        args = cli.build_parser().parse_args(["element", "--list"])
        assert args.template == "element"
        assert args.list_templates is True


class TestInit:
    @pytest.mark.asyncio
    async def test_named_template_runs_directly(self):
        with patch("polymer_init.cli.run_generator", new_callable=AsyncMock) as run, patch(
            "polymer_init.cli.prompt_generator_selection", new_callable=AsyncMock
        ) as select:
            env = GeneratorEnvironment()
            await cli.init("element", env, InitConfig())

        select.assert_not_awaited()
        identifier, context = run.await_args.args
        assert identifier == "polymer-init-element:app"
        assert context.template_name == "element"
        assert context.env is env

    @pytest.mark.asyncio
    async def test_no_template_prompts(self):
        with patch("polymer_init.cli.run_generator", new_callable=AsyncMock) as run, patch(
            "polymer_init.cli.prompt_generator_selection", new_callable=AsyncMock
        ) as select:
            await cli.init(None, GeneratorEnvironment(), InitConfig())

        run.assert_not_awaited()
        context = select.await_args.args[0]
        assert context.template_name is None

    @pytest.mark.asyncio
    async def test_unknown_template_uses_bare_name(self):
        with pytest.raises(TemplateNotFoundError, match="^Template nope not found$"):
            await cli.init("nope", GeneratorEnvironment(), InitConfig())


class TestMain:
    def test_runs_named_template(self, env: GeneratorEnvironment):
        calls: list[str] = []
        env.register(lambda: calls.append("element"), "polymer-init-element:app")

        cli.main(["element"])

        assert calls == ["element"]

    def test_unknown_template_exits_1(self, env: GeneratorEnvironment):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["missing"])
        assert exc_info.value.code == 1

    def test_generator_failure_exits_1(self, env: GeneratorEnvironment):
        def broken() -> None:
            raise RuntimeError("[boom]")

        env.register(broken, "polymer-init-element:app")
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["element"])
        assert exc_info.value.code == 1

    def test_aborted_prompt_exits_1(self, env: GeneratorEnvironment):
        with patch("polymer_init.cli.prompt_generator_selection", new_callable=AsyncMock, side_effect=EOFError()):
            with pytest.raises(SystemExit) as exc_info:
                cli.main([])
        assert exc_info.value.code == 1

    def test_list_does_not_run(self, env: GeneratorEnvironment):
        calls: list[str] = []
        env.register(lambda: calls.append("ran"), "polymer-init-element:app")
        with patch("polymer_init.cli.print_ansi") as printed:
            cli.main(["--list"])
        assert calls == []
        printed.assert_called_once_with("  element: \x1b[2mA blank element template\x1b[22m")

    def test_list_empty(self, env: GeneratorEnvironment):
        with patch("polymer_init.cli.print_ansi") as printed, patch("polymer_init.cli.print_warning") as warned:
            cli.main(["--list"])
        printed.assert_not_called()
        warned.assert_called_once_with("No templates installed.")


class TestBrokenPlugin:
    @pytest.fixture
    def broken_plugin(self):
        module = MagicMock()
        module.name = "polymer_init_broken"
        with patch("polymer_init.init.environment.pkgutil.iter_modules", return_value=[module]), patch(
            "polymer_init.init.environment.importlib.import_module",
            side_effect=ImportError("broken plugin"),
        ):
            yield

    @pytest.mark.parametrize("argv", [["--list"], ["element"], []])
    def test_failed_discovery_exits_1(self, broken_plugin, argv: list[str]):
        with patch.object(cli, "print_error") as error:
            with pytest.raises(SystemExit) as exc_info:
                cli.main(argv)
        assert exc_info.value.code == 1
        error.assert_called_once_with("broken plugin")
