"""CLI — run date and list prompts from the shell, check marked-date files."""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(name="inq", help="Interactive terminal prompts")


@app.command("date")
def date_command(
    message: str = typer.Option("Pick a date", "--message", "-m", help="Prompt message"),
    start: Optional[str] = typer.Option(None, "--start", help="Starting date (YYYY-MM-DD), default today"),
    min_date: Optional[str] = typer.Option(None, "--min", help="Earliest selectable date"),
    max_date: Optional[str] = typer.Option(None, "--max", help="Latest selectable date"),
    week_start: Optional[str] = typer.Option(None, "--week-start", help="First weekday of calendar rows"),
    marked_file: Optional[Path] = typer.Option(None, "--marked", help="YAML file of marked dates"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML prompt config file"),
    validators_file: Optional[Path] = typer.Option(None, "--validators", help="Python file of validators"),
    validator_names: list[str] = typer.Option([], "--validator", help="Validator name (repeatable)"),
    fmt: Optional[str] = typer.Option(None, "--format", help="Jinja2 template for the answer"),
    vim: Optional[bool] = typer.Option(None, "--vim/--no-vim", help="hjkl navigation"),
    json_output: bool = typer.Option(False, "--json", help="Output raw JSON"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write debug logs to this file"),
) -> None:
    """Pick a date on a calendar."""
    from inq.models.dates import DateSelect
    from inq.runner.engine import prompt_date
    from inq.utils.yaml_io import load_marked_dates

    _setup_logging(log_file)
    try:
        config, file_week_start = _load_config(config_file, vim_mode=vim)
        fields = {
            "message": message,
            "min_date": _parse_date(min_date, "--min"),
            "max_date": _parse_date(max_date, "--max"),
            "week_start": _resolve_week_start(week_start, file_week_start),
            "config": config,
        }
        if start:
            fields["starting_date"] = _parse_date(start, "--start")
        if marked_file:
            fields["marked_dates"] = load_marked_dates(marked_file)
        if validator_names:
            fields["validators"] = _load_validators(validators_file, validator_names)
        if fmt:
            fields["formatter"] = _template(fmt)

        result = prompt_date(DateSelect(**fields), _make_backend())
    except typer.BadParameter:
        raise
    except Exception as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    _output_result(result, json_output)


@app.command("select")
def select_command(
    options: list[str] = typer.Argument(..., help="Options to choose from"),
    message: str = typer.Option("Choose an option", "--message", "-m", help="Prompt message"),
    start_cursor: int = typer.Option(0, "--start-cursor", help="Initially highlighted option"),
    page_size: Optional[int] = typer.Option(None, "--page-size", help="Options shown per page"),
    keep_filter: Optional[bool] = typer.Option(None, "--keep-filter/--no-keep-filter"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML prompt config file"),
    fmt: Optional[str] = typer.Option(None, "--format", help="Jinja2 template for the answer"),
    vim: Optional[bool] = typer.Option(None, "--vim/--no-vim", help="hjkl navigation"),
    json_output: bool = typer.Option(False, "--json", help="Output raw JSON"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write debug logs to this file"),
) -> None:
    """Pick one option from a filterable list."""
    from inq.models.select import Select
    from inq.runner.engine import prompt_select

    _setup_logging(log_file)
    try:
        config, _ = _load_config(config_file, vim_mode=vim, page_size=page_size, keep_filter=keep_filter)
        if fmt:
            config = config.model_copy(update={"transformer": _template(fmt)})
        spec = Select(message=message, options=options, starting_cursor=start_cursor, config=config)
        result = prompt_select(spec, _make_backend())
    except Exception as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    _output_result(result, json_output)


@app.command()
def check(
    marked_file: Path = typer.Argument(..., help="YAML file of marked dates"),
) -> None:
    """Validate a marked-dates file."""
    from inq.utils.yaml_io import load_marked_dates

    try:
        marked = load_marked_dates(marked_file)
    except Exception as exc:
        typer.echo(f"FAIL: {exc}", err=True)
        raise typer.Exit(1)

    deletable = sum(1 for info in marked.values() if info.deletable)
    typer.echo(f"OK: {len(marked)} marked dates, {deletable} deletable")


def _make_backend():
    from inq.ui.terminal import TerminalBackend

    return TerminalBackend()


def _setup_logging(log_file: Path | None) -> None:
    # Logs never go to the terminal the prompt is drawn on
    if log_file:
        logging.basicConfig(
            filename=str(log_file),
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )


def _load_config(config_file: Path | None, **overrides):
    """Defaults < environment < config file < command-line flags."""
    from inq.models.config import PromptConfig
    from inq.utils.env_config import prompt_config_from_env
    from inq.utils.yaml_io import load_prompt_config

    config = prompt_config_from_env()
    week_start = None
    if config_file:
        config, week_start = load_prompt_config(config_file, base=config)

    flags = {k: v for k, v in overrides.items() if v is not None}
    if flags:
        config = PromptConfig.model_validate({**config.model_dump(), **flags})
    return config, week_start


def _resolve_week_start(flag: str | None, from_file):
    from inq.models.config import Weekday
    from inq.utils.env_config import get_week_start

    if flag:
        try:
            return Weekday.from_name(flag)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--week-start")
    return from_file or get_week_start()


def _parse_date(value: str | None, option: str) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got {value!r}", param_hint=option)


def _load_validators(validators_file: Path | None, names: list[str]) -> list:
    from inq.utils.yaml_io import get_validator, load_validator_module

    if validators_file is None:
        raise typer.BadParameter("--validator requires --validators FILE", param_hint="--validator")
    module = load_validator_module(validators_file)
    return [get_validator(module, name) for name in names]


def _template(fmt: str):
    from inq.utils.templating import make_template_formatter

    return make_template_formatter(fmt)


def _output_result(result, json_output: bool) -> None:
    """Output the prompt result."""
    if json_output:
        typer.echo(json.dumps(result.model_dump(mode="json"), indent=2))
    elif not result.cancelled:
        typer.echo(result.formatted)
        if getattr(result.answer, "to_delete", False):
            typer.echo("(marked for deletion)")

    if result.cancelled:
        if not json_output:
            typer.echo("Cancelled", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
