"""Command-line interface for PassGen.

This module provides the CLI commands for generating passwords,
validating them and inspecting the strength policies.
"""

import json
from typing import NoReturn

import click

from passgen import __version__
from passgen.core.config import get_settings
from passgen.core.logging import LoggingContext, configure_logging, get_logger
from passgen.domain.entities.strength import StrengthLevel
from passgen.domain.exceptions import PassGenError
from passgen.domain.services import (
    PasswordGenerator,
    PasswordValidator,
    get_policy,
    pseudo_random_source,
    random_source_from_settings,
)

STRENGTH_CHOICE = click.Choice([level.value for level in StrengthLevel], case_sensitive=False)


def _echo_report(report) -> None:
    """Print a validation report as a checklist."""
    checks = [
        ("lowercase letter", report.has_lowercase),
        ("uppercase letter", report.has_uppercase),
        ("digit", report.has_numbers),
        ("symbol", report.has_symbols),
        (f"at least {report.min_length} characters", report.meets_length),
    ]
    click.echo(f"Strength: {report.strength.value}")
    for label, passed in checks:
        click.echo(f"  [{'x' if passed else ' '}] {label}")
    click.echo(f"Result:   {'VALID' if report.valid else 'INVALID'}")


@click.group()
@click.version_option(version=__version__, prog_name="PassGen")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Set log level (overrides PASSGEN_LOG_LEVEL)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """PassGen - generate and validate passwords against strength policies.

    Strength levels: low (6+ chars, letters and digits), medium (8+ chars,
    adds basic symbols) and high (12+ chars, adds extended symbols).
    """
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level.upper() if log_level else None


@cli.command()
@click.option("--length", "-l", type=int, default=None, help="Password length (default from config)")
@click.option("--strength", "-s", type=STRENGTH_CHOICE, default=None, help="Strength level (default from config)")
@click.option("--count", "-n", type=click.IntRange(min=1), default=1, help="Number of passwords to generate")
@click.option(
    "--clamp/--no-clamp",
    default=False,
    help="Raise the length to the strength minimum instead of failing",
)
@click.option("--seed", type=int, default=None, help="Seed a pseudo-random source for reproducible output")
@click.option("--show-report", is_flag=True, default=False, help="Print the validation report after each password")
@click.pass_context
def generate(
    ctx: click.Context,
    length: int | None,
    strength: str | None,
    count: int,
    clamp: bool,
    seed: int | None,
    show_report: bool,
) -> None:
    """Generate one or more passwords."""
    settings = get_settings()
    configure_logging(settings, ctx.obj.get("log_level"))
    logger = get_logger(__name__)

    level = StrengthLevel.parse(strength) if strength else settings.default_strength
    bind_length = length if length is not None else settings.default_length

    policy = get_policy(level)
    if clamp and bind_length < policy.min_length:
        logger.info(
            "Clamping length to policy minimum",
            requested=bind_length,
            min_length=policy.min_length,
        )
        bind_length = policy.min_length

    source = pseudo_random_source(seed) if seed is not None else random_source_from_settings(settings)
    generator = PasswordGenerator(source)
    validator = PasswordValidator()

    with LoggingContext(command="generate", strength=level.value):
        try:
            for _ in range(count):
                password = generator.generate(bind_length, level)
                click.echo(password)
                if show_report:
                    _echo_report(validator.validate(password, level))
        except PassGenError as e:
            click.echo(f"Error: {e.message}", err=True)
            logger.error("Password generation failed", error=e.code)
            raise SystemExit(1)

        logger.info("Generated passwords", count=count, length=bind_length)


@cli.command()
@click.argument("password")
@click.option("--strength", "-s", type=STRENGTH_CHOICE, default=None, help="Strength level (default from config)")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the report as JSON")
@click.pass_context
def validate(ctx: click.Context, password: str, strength: str | None, as_json: bool) -> None:
    """Validate PASSWORD against a strength policy.

    Exits with status 0 when the password is valid and 2 when it is not.
    """
    settings = get_settings()
    configure_logging(settings, ctx.obj.get("log_level"))

    level = StrengthLevel.parse(strength) if strength else settings.default_strength
    report = PasswordValidator().validate(password, level)

    if as_json:
        payload = report.to_dict()
        payload["violations"] = [violation.code for violation in report.violations]
        click.echo(json.dumps(payload, indent=2))
    else:
        _echo_report(report)
        for violation in report.violations:
            click.echo(f"  - {violation.message}")

    if not report.valid:
        raise SystemExit(2)


@cli.command()
@click.option("--strength", "-s", type=STRENGTH_CHOICE, default=None, help="Only show this level")
def policy(strength: str | None) -> None:
    """Show minimum length and character classes per strength level."""
    levels = [StrengthLevel.parse(strength)] if strength else list(StrengthLevel)

    for level in levels:
        level_policy = get_policy(level)
        click.echo(f"{level.value}: minimum length {level_policy.min_length}")
        for char_class in level_policy.classes:
            click.echo(f"  {char_class.name:<10} {char_class.characters}")


@cli.command()
def info() -> None:
    """Display PassGen configuration."""
    settings = get_settings()

    click.echo(f"""
{settings.app_name} v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:      {settings.environment}

Generation:
  Default Strength: {settings.default_strength.value}
  Default Length:   {settings.default_length}
  Random Source:    {settings.random_source}

Logging:
  Level:            {settings.log_level}
  Format:           {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `passgen` command is run
    or when using `python -m passgen`.
    """
    cli()


if __name__ == "__main__":
    main()
