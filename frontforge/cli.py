"""Command line interface."""

import sys
from dataclasses import replace
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from click import Context, ParamType, Parameter, UsageError, argument, group, option, version_option
from click import Path as ClickPath

from frontforge.__metadata__ import __version__
from frontforge.config import (
    Animation,
    DataFetching,
    DataViz,
    FormManagement,
    Framework,
    I18n,
    Icons,
    Language,
    LoggingConfig,
    PackageManager,
    ProjectConfig,
    Routing,
    StateManagement,
    Structure,
    Styling,
    Testing,
    UILibrary,
    Utilities,
    framework_defaults,
    is_valid_project_name,
    parse_option,
    quick_preset,
)
from frontforge.exceptions import ConfigurationError

if TYPE_CHECKING:
    from rich.table import Table

    from frontforge.generators import GeneratorCapability, GeneratorRegistry
    from frontforge.project import SetupResult


class OptionType(ParamType):
    """Click parameter type resolving user input to an option enumeration member."""

    def __init__(self, enum_cls: "type[Enum]") -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()

    def convert(self, value: Any, param: "Optional[Parameter]", ctx: "Optional[Context]") -> Any:
        if isinstance(value, self.enum_cls):
            return value
        try:
            return parse_option(self.enum_cls, value)
        except ConfigurationError as exc:
            self.fail(str(exc), param, ctx)

    def get_metavar(self, param: "Parameter", ctx: "Optional[Context]" = None) -> str:
        return "[" + "|".join(str(member.value) for member in self.enum_cls) + "]"


# CLI option name -> (config field, option enumeration)
_AXIS_OPTIONS: "dict[str, tuple[str, type[Enum]]]" = {
    "lang": ("language", Language),
    "pm": ("package_manager", PackageManager),
    "styling": ("styling", Styling),
    "routing": ("routing", Routing),
    "state": ("state_management", StateManagement),
    "data": ("data_fetching", DataFetching),
    "testing": ("testing", Testing),
    "ui": ("ui_library", UILibrary),
    "forms": ("form_management", FormManagement),
    "animation": ("animation", Animation),
    "icons": ("icons", Icons),
    "dataviz": ("data_viz", DataViz),
    "utils": ("utilities", Utilities),
    "i18n": ("i18n", I18n),
    "structure": ("structure", Structure),
}


@group(name="frontforge")
@version_option(__version__, prog_name="frontforge")
def frontforge_group() -> None:
    """Scaffold frontend projects."""


def build_config(
    name: "Optional[str]",
    path: "Optional[Path]",
    quick: bool,
    framework: "Optional[Framework]",
    overrides: "dict[str, Any]",
    dry_run: bool,
    install: bool,
) -> ProjectConfig:
    """Combine the command line choices into a configuration.

    ``--quick`` starts from the recommended preset; otherwise every optional
    axis starts at ``None``. A framework given together with ``--quick``
    re-targets the preset at that framework. Explicit options win over both.

    Raises:
        UsageError: If neither a name nor a path is given, or the name is invalid.
    """
    if name is None and path is None:
        msg = "Provide a project NAME or --path."
        raise UsageError(msg)
    if name is not None and not is_valid_project_name(name):
        msg = f"Invalid project name {name!r}: use letters, numbers, hyphens and underscores only."
        raise UsageError(msg)
    config = quick_preset() if quick else ProjectConfig()
    if framework is not None and framework is not config.framework:
        config = framework_defaults(framework, config) if quick else replace(config, framework=framework)
    changes = {field: value for field, value in overrides.items() if value is not None}
    return replace(
        config,
        **changes,
        project_name=name or "",
        project_path=path if path is not None else name,
        dry_run=dry_run,
        auto_install=install,
    )


def _print_next_steps(result: "SetupResult") -> None:
    from rich.markup import escape

    from frontforge._console import console
    from frontforge.generators.shared import run_command

    package_manager = result.config.package_manager or PackageManager.NPM
    console.print("\n[bold]Next steps:[/]")
    console.print(f"  cd {escape(str(result.project_path))}")
    if not result.installed:
        console.print(f"  {package_manager.value} install")
    console.print(f"  {run_command(package_manager, 'dev')}")


def _install_preflight(config: ProjectConfig) -> ProjectConfig:
    """Run the install preflight checks; disable installing when one fails fatally."""
    from frontforge._console import log_warn
    from frontforge.preflight import has_fatal_failures, print_preflight_report, run_preflight_checks

    checks = run_preflight_checks(config)
    print_preflight_report(checks)
    if has_fatal_failures(checks):
        log_warn("Skipping dependency installation, see the preflight report above.")
        return replace(config, auto_install=False)
    return config


@frontforge_group.command(name="create", help="Create a new frontend project.")
@argument("name", required=False)
@option(
    "--path",
    "path",
    type=ClickPath(file_okay=False, path_type=Path),
    default=None,
    help="Directory to create the project in. Defaults to NAME in the current directory.",
)
@option("--quick", is_flag=True, default=False, help="Start from the recommended React + TypeScript setup.")
@option("--dry-run", is_flag=True, default=False, help="Show the files that would be generated and write nothing.")
@option("--install", is_flag=True, default=False, help="Install dependencies after generating the project.")
@option("--framework", type=OptionType(Framework), default=None, help="Framework to generate.")
@option("--lang", type=OptionType(Language), default=None, help="Source language.")
@option("--pm", type=OptionType(PackageManager), default=None, help="Package manager used for installing.")
@option("--styling", type=OptionType(Styling), default=None, help="Styling approach.")
@option("--routing", type=OptionType(Routing), default=None, help="Routing library.")
@option("--state", type=OptionType(StateManagement), default=None, help="State management library.")
@option("--data", type=OptionType(DataFetching), default=None, help="Data fetching library.")
@option("--testing", type=OptionType(Testing), default=None, help="Test runner.")
@option("--ui", type=OptionType(UILibrary), default=None, help="Component library.")
@option("--forms", type=OptionType(FormManagement), default=None, help="Form or validation library.")
@option("--animation", type=OptionType(Animation), default=None, help="Animation library.")
@option("--icons", type=OptionType(Icons), default=None, help="Icon set.")
@option("--dataviz", type=OptionType(DataViz), default=None, help="Charting library.")
@option("--utils", type=OptionType(Utilities), default=None, help="Date or utility library.")
@option("--i18n", type=OptionType(I18n), default=None, help="Internationalization library.")
@option("--structure", type=OptionType(Structure), default=None, help="Directory layout.")
@option("--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
def create(
    name: "Optional[str]",
    path: "Optional[Path]",
    quick: bool,
    dry_run: bool,
    install: bool,
    framework: "Optional[Framework]",
    verbose: bool,
    **axes: Any,
) -> None:
    """Generate a project."""
    from rich.markup import escape

    from frontforge._console import configure_logging, console, log_fail, log_success, log_warn
    from frontforge.dryrun import print_dry_run
    from frontforge.exceptions import FrontForgeError
    from frontforge.generators import default_registry
    from frontforge.project import setup_project
    from frontforge.validation import print_validation_report

    logging_config = LoggingConfig(level="verbose") if verbose else LoggingConfig()
    configure_logging(logging_config)
    overrides = {_AXIS_OPTIONS[key][0]: value for key, value in axes.items()}
    config = build_config(name, path, quick, framework, overrides, dry_run, install)

    if config.auto_install and not config.dry_run:
        config = _install_preflight(config)

    registry = default_registry()
    console.rule(f"[yellow]Creating {config.framework.value} project[/]", align="left")

    def echo(line: str) -> None:
        console.print(line, style="dim", markup=False, highlight=False)

    try:
        result = setup_project(
            config,
            registry,
            on_install_line=echo if logging_config.show_install_output else None,
        )
    except FrontForgeError as exc:
        log_fail(escape(str(exc)))
        sys.exit(1)

    if result.dry_run:
        print_dry_run(result)
        return

    log_success(f"Created {len(result.files)} files in {escape(str(result.project_path))}")
    if result.install_error is not None:
        log_warn(f"Dependency installation failed: {escape(str(result.install_error))}")
    elif result.installed:
        log_success("Dependencies installed")
    print_validation_report(result.validation)
    _print_next_steps(result)
    if not result.passed:
        sys.exit(1)


def _describe(values: "tuple[Enum, ...] | None") -> str:
    if values is None:
        return "-"
    if not values:
        return "None only"
    return ", ".join(str(value.value) for value in values)


def capability_table(registry: "GeneratorRegistry") -> "Table":
    """Build a table of each registered framework's capability set."""
    from rich.table import Table

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Framework")
    table.add_column("Family", style="dim")
    for column in ("Languages", "Styling", "Routing", "State", "Data fetching", "Testing"):
        table.add_column(column)
    for generator in registry:
        capability: GeneratorCapability = generator.supported_options()
        table.add_row(
            generator.framework.value,
            "meta" if generator.framework.is_meta else "core",
            _describe(capability.languages),
            _describe(capability.styling),
            _describe(capability.routing),
            _describe(capability.state_management),
            _describe(capability.data_fetching),
            _describe(capability.testing),
        )
    return table


@frontforge_group.command(name="frameworks", help="List the supported frameworks and their options.")
def frameworks() -> None:
    """Print the capability table."""
    from frontforge._console import console
    from frontforge.generators import default_registry

    console.print(capability_table(default_registry()))
