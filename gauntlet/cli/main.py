"""Main CLI entry point for Gauntlet."""

import sys
from pathlib import Path
from typing import Any, NoReturn

import click
from pydantic import ValidationError as PydanticValidationError

from gauntlet import __version__
from gauntlet.core.exceptions import GauntletError
from gauntlet.core.logging import configure_logging
from gauntlet.core.settings import (
    GauntletSettings,
    generate_example_config,
    get_settings,
)
from gauntlet.loader import StandardsCatalog, StandardsLoader
from gauntlet.loader.results import ResultsLoader, parse_inline_results
from gauntlet.reporters import ConsoleReporter, create_reporter
from gauntlet.scoring import GauntletScorer, Profile, age_bracket, format_time_entry
from gauntlet.scoring.units import parse_time

# Exit codes
EXIT_SUCCESS = 0  # Command succeeded
EXIT_FAILURE = 1  # Catalog failed validation
EXIT_ERROR = 2  # Error (invalid config, missing file, bad input, etc.)


class ConfigContext:
    """Context object to hold configuration state."""

    def __init__(self) -> None:
        self.settings: GauntletSettings | None = None
        self.config_file: Path | None = None
        self.verbose: bool = False

    def load_settings(self, config_file: Path | None = None) -> GauntletSettings:
        """Load settings from the given file or the discovered one."""
        self.config_file = config_file
        self.settings = get_settings(config_file=config_file)
        return self.settings

    def get_settings(self) -> GauntletSettings:
        if self.settings is None:
            return self.load_settings(self.config_file)
        return self.settings


pass_config = click.make_pass_decorator(ConfigContext, ensure=True)


def _fail(message: str, code: int = EXIT_ERROR) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(code)


def _load_catalog(
    config_ctx: ConfigContext, standards_file: Path | None
) -> StandardsCatalog:
    """Load the catalog from an option, the settings, or the bundled file."""
    path = standards_file or config_ctx.get_settings().standards_file
    loader = StandardsLoader()
    try:
        if path:
            return loader.load_file(path)
        return loader.load_default()
    except GauntletError as e:
        _fail(str(e))


@click.group(invoke_without_command=True)
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to gauntlet.config.yaml configuration file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.version_option(version=__version__, prog_name="gauntlet")
@click.pass_context
def cli(ctx: click.Context, config_file: Path | None, verbose: bool) -> None:
    """Gauntlet - fitness standards scoring.

    Scores test results against age- and gender-graded standards, then
    aggregates them into domain scores, an archetype and a status band.

    Examples:

      # Score a results sheet
      gauntlet score results.yaml

      # Score inline results for a 41-year-old woman
      gauntlet score -r "Deadlift=225" -r "5k Run=24:30" --gender female --age 41

      # Show the standards table for your bracket
      gauntlet standards --gender male --age 37

      # Validate a custom catalog
      gauntlet validate my_standards.yaml
    """
    ctx.ensure_object(ConfigContext)
    config_ctx = ctx.obj
    config_ctx.verbose = verbose

    try:
        settings = config_ctx.load_settings(config_file)
    except PydanticValidationError as e:
        _fail(f"Invalid configuration: {e}")

    configure_logging(
        level="DEBUG" if verbose else settings.logging.level,
        json_output=settings.logging.json_output,
        log_file=settings.logging.file,
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(name="version")
def version_cmd() -> None:
    """Show Gauntlet version information."""
    click.echo(f"Gauntlet v{__version__}")
    click.echo(f"Python: {sys.version.split()[0]}")
    click.echo(f"Platform: {sys.platform}")


@cli.command(name="score")
@click.argument(
    "results_file",
    required=False,
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "--result",
    "-r",
    "inline_results",
    multiple=True,
    help="Result as NAME=VALUE; may be repeated and overrides the results file",
)
@click.option("--gender", type=str, help="Gender key (default from config)")
@click.option(
    "--age",
    type=click.IntRange(min=21, max=120),
    help="Age in years (default from config)",
)
@click.option(
    "--bodyweight",
    type=click.FloatRange(min=0, min_open=True),
    help="Bodyweight in lbs for bodyweight-relative lifts",
)
@click.option(
    "--standards",
    "standards_file",
    type=click.Path(exists=True, path_type=Path),
    help="Standards catalog YAML (default: bundled catalog)",
)
@click.option(
    "--output",
    "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format",
)
@click.option(
    "--output-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the report to a file instead of stdout",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show raw input and standards per test",
)
@pass_config
def score_cmd(
    config_ctx: ConfigContext,
    results_file: Path | None,
    inline_results: tuple[str, ...],
    gender: str | None,
    age: int | None,
    bodyweight: float | None,
    standards_file: Path | None,
    output: str,
    output_file: Path | None,
    verbose: bool,
) -> None:
    """Score test results and interpret the profile.

    RESULTS_FILE is a YAML sheet with optional 'profile' and 'results'
    sections. Profile values are taken from options first, then the sheet,
    then the configuration.

    Examples:

      gauntlet score results.yaml --output=json --output-file=report.json

      gauntlet score -r "Pull-Ups=12" -r "Grace=4:10" --age 37

    Exit Codes:

      0 - Report produced
      2 - Error occurred
    """
    if not results_file and not inline_results:
        _fail("Nothing to score. Give a RESULTS_FILE or --result NAME=VALUE.")

    settings = config_ctx.get_settings()
    catalog = _load_catalog(config_ctx, standards_file)

    sheet_profile: dict[str, Any] = {}
    results: dict[str, Any] = {}
    try:
        if results_file:
            sheet = ResultsLoader().load_file(results_file)
            sheet_profile = sheet.profile
            results.update(sheet.results)
        results.update(parse_inline_results(inline_results))
    except GauntletError as e:
        _fail(str(e))

    defaults = settings.profile
    try:
        profile = Profile(
            gender=gender or sheet_profile.get("gender") or defaults.gender,
            age=age or sheet_profile.get("age") or defaults.age,
            bodyweight=(
                bodyweight or sheet_profile.get("bodyweight") or defaults.bodyweight
            ),
        )
    except PydanticValidationError as e:
        _fail(f"Invalid profile: {e}")

    report = GauntletScorer(catalog).evaluate(results, profile)

    if output == "json":
        create_reporter("json", {"output_file": output_file}).report(report)
    elif output_file:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w") as f:
            reporter = create_reporter(
                "console", {"output": f, "use_colors": False, "verbose": verbose}
            )
            reporter.report(report)
    else:
        create_reporter("console", {"verbose": verbose}).report(report)

    if output_file:
        click.echo(f"Report written to {output_file}", err=True)

    sys.exit(EXIT_SUCCESS)


@cli.command(name="standards")
@click.option("--gender", type=str, help="Gender key (default from config)")
@click.option(
    "--age",
    type=click.IntRange(min=21, max=120),
    help="Age in years (default from config)",
)
@click.option(
    "--standards",
    "standards_file",
    type=click.Path(exists=True, path_type=Path),
    help="Standards catalog YAML (default: bundled catalog)",
)
@pass_config
def standards_cmd(
    config_ctx: ConfigContext,
    gender: str | None,
    age: int | None,
    standards_file: Path | None,
) -> None:
    """Show the standards table for one gender and age bracket.

    Examples:

      gauntlet standards --gender female --age 44
    """
    settings = config_ctx.get_settings()
    catalog = _load_catalog(config_ctx, standards_file)

    gender = (gender or settings.profile.gender).lower()
    if gender not in catalog.genders():
        _fail(
            f"Unknown gender '{gender}'. "
            f"Available: {', '.join(catalog.genders())}"
        )

    bracket = age_bracket(age or settings.profile.age)
    if bracket is None:
        _fail("No age bracket for this age")

    ConsoleReporter().report_standards(catalog, gender, bracket)


@cli.command(name="rules")
@click.option(
    "--standards",
    "standards_file",
    type=click.Path(exists=True, path_type=Path),
    help="Standards catalog YAML (default: bundled catalog)",
)
@pass_config
def rules_cmd(config_ctx: ConfigContext, standards_file: Path | None) -> None:
    """Show the movement standard of every test."""
    catalog = _load_catalog(config_ctx, standards_file)
    ConsoleReporter().report_rules(catalog)


@cli.command(name="validate")
@click.argument(
    "standards_file",
    required=False,
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="List the tests of every domain",
)
@pass_config
def validate_cmd(
    config_ctx: ConfigContext, standards_file: Path | None, verbose: bool
) -> None:
    """Validate a standards catalog.

    Checks the YAML syntax, the schema, threshold ordering and that domains
    only reference defined tests. Without STANDARDS_FILE the configured or
    bundled catalog is validated.

    Exit Codes:

      0 - Catalog is valid
      1 - Catalog is invalid
    """
    path = standards_file or config_ctx.get_settings().standards_file
    loader = StandardsLoader()
    label = str(path) if path else "bundled catalog"
    click.echo(f"Validating standards: {label}")

    try:
        catalog = loader.load_file(path) if path else loader.load_default()
    except GauntletError as e:
        click.echo(f"  ✗ Validation failed: {e}", err=True)
        sys.exit(EXIT_FAILURE)

    click.echo(f"  ✓ Catalog '{catalog.name}' is valid")
    click.echo(f"    Version: {catalog.version}")
    click.echo(f"    Tests: {len(catalog.tests)}")
    click.echo(f"    Domains: {len(catalog.domains)}")
    if verbose:
        for domain, test_names in catalog.domains.items():
            click.echo(f"      - {domain}: {', '.join(test_names)}")
    sys.exit(EXIT_SUCCESS)


@cli.command(name="time-entry")
@click.argument("text")
@click.option(
    "--seconds",
    is_flag=True,
    help="Also show the entry in seconds once it is a complete time",
)
def time_entry_cmd(text: str, seconds: bool) -> None:
    """Format a partially typed time the way an entry field would.

    Examples:

      gauntlet time-entry 0945       # 9:45

      gauntlet time-entry 12:75      # 12:59
    """
    formatted = format_time_entry(text)
    if seconds:
        total = parse_time(formatted)
        suffix = f" ({total} seconds)" if total is not None else " (incomplete)"
        click.echo(formatted + suffix)
    else:
        click.echo(formatted)


@cli.command(name="init")
@click.argument(
    "output_path",
    required=False,
    default="gauntlet.config.yaml",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init_cmd(output_path: Path, force: bool) -> None:
    """Write an example gauntlet.config.yaml."""
    if output_path.exists() and not force:
        _fail(f"{output_path} already exists (use --force to overwrite)")
    generate_example_config(output_path)
    click.echo(f"Created {output_path}")


def main() -> None:
    """Main entry point for the CLI."""
    cli(auto_envvar_prefix="GAUNTLET")


if __name__ == "__main__":
    main()
