"""Typer CLI application for tote rack quotes."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from toterack.application import GenerateQuoteCommand, QuoteOutput
from toterack.application.config import (
    ConfigError,
    QuoteConfiguration,
    config_to_quote_input,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
)
from toterack.cli.commands import display_load_error, templates_app, validate_command
from toterack.domain import estimate_price
from toterack.infrastructure import (
    CutListFormatter,
    GeometryFormatter,
    JsonExporter,
    LumberPlanFormatter,
    QuoteReportFormatter,
    format_money,
)

logger = logging.getLogger(__name__)

# 27 gallon tote, used when no configuration file is given
DEFAULT_CONTAINER = {"length": 30.25, "width": 20.25, "height": 14.125}
DEFAULT_LAYOUT = {"columns": 3, "rows": 3}

app = typer.Typer(
    name="toterack",
    help="Quote 2x4 tote storage racks: dimensions, cut list, lumber, and profit.",
)

app.command(name="validate")(validate_command)
app.add_typer(templates_app, name="templates")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def parse_choices(choices: list[str] | None) -> dict[str, float]:
    """Parse repeated ``LABEL=FEET`` options into a lumber override map.

    Raises:
        typer.BadParameter: If an entry is not ``LABEL=FEET``.

    Example:
        >>> parse_choices(["Runners=10"])
        {'Runners': 10.0}
    """
    overrides: dict[str, float] = {}
    for entry in choices or []:
        label, sep, feet = entry.partition("=")
        label = label.strip()
        if not sep or not label:
            raise typer.BadParameter(f"Expected LABEL=FEET, got '{entry}'")
        try:
            overrides[label] = float(feet)
        except ValueError:
            raise typer.BadParameter(f"Board length must be a number, got '{feet}'")
    return overrides


def _load_base_config(config_file: Path | None) -> QuoteConfiguration:
    if config_file is not None:
        return load_config(config_file)
    return load_config_from_dict(
        {
            "schema_version": "1.0",
            "container": dict(DEFAULT_CONTAINER),
            "layout": dict(DEFAULT_LAYOUT),
        }
    )


def _run_quote(
    config_file: Path | None,
    length: float | None,
    width: float | None,
    height: float | None,
    columns: int | None,
    rows: int | None,
    choose: list[str] | None = None,
    price_override: float | None = None,
    material_override: float | None = None,
    delivery: float | None = None,
    wheels: bool | None = None,
    plywood_top: bool | None = None,
) -> QuoteOutput:
    overrides = parse_choices(choose)
    try:
        config = merge_config_with_cli(
            _load_base_config(config_file),
            length=length,
            width=width,
            height=height,
            columns=columns,
            rows=rows,
            overrides=overrides,
            price_override=price_override,
            material_override=material_override,
            delivery=delivery,
            wheels=wheels,
            plywood_top=plywood_top,
        )
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    logger.debug(f"Quoting {config.layout.columns}x{config.layout.rows} rack")
    return GenerateQuoteCommand().execute(config_to_quote_input(config))


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON configuration file"),
]
LengthOption = Annotated[
    float | None, typer.Option("--length", "-l", help="Tote length in inches")
]
WidthOption = Annotated[
    float | None, typer.Option("--width", "-w", help="Tote width in inches")
]
HeightOption = Annotated[
    float | None, typer.Option("--height", "-H", help="Tote height in inches")
]
ColumnsOption = Annotated[
    int | None, typer.Option("--columns", help="Bays across")
]
RowsOption = Annotated[int | None, typer.Option("--rows", help="Bays stacked")]


@app.command()
def quote(
    config_file: ConfigOption = None,
    length: LengthOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    columns: ColumnsOption = None,
    rows: RowsOption = None,
    choose: Annotated[
        list[str] | None,
        typer.Option(
            "--choose",
            help="Force a board length for a cut, e.g. Runners=10 (repeatable)",
        ),
    ] = None,
    price_override: Annotated[
        float | None,
        typer.Option("--price-override", help="Sale price instead of the price table"),
    ] = None,
    material_override: Annotated[
        float | None,
        typer.Option("--material-override", help="Lumber cost instead of the plan"),
    ] = None,
    delivery: Annotated[
        float | None,
        typer.Option("--delivery", help="Delivery charge"),
    ] = None,
    wheels: Annotated[
        bool | None,
        typer.Option("--wheels/--no-wheels", help="Include the wheels add-on"),
    ] = None,
    plywood_top: Annotated[
        bool | None,
        typer.Option("--plywood-top/--no-plywood-top", help="Include the plywood top add-on"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = "text",
) -> None:
    """Generate a full quote: dimensions, cut list, lumber, price, and profit.

    Examples:
        toterack quote --columns 4 --rows 3
        toterack quote --config my-rack.json --choose Runners=10
        toterack quote -c my-rack.json --format json
    """
    if output_format not in ("text", "json"):
        typer.echo(f"Error: Unknown format '{output_format}'. Use text or json.", err=True)
        raise typer.Exit(code=1)

    output = _run_quote(
        config_file,
        length,
        width,
        height,
        columns,
        rows,
        choose=choose,
        price_override=price_override,
        material_override=material_override,
        delivery=delivery,
        wheels=wheels,
        plywood_top=plywood_top,
    )

    if output_format == "json":
        typer.echo(JsonExporter().export(output))
    else:
        typer.echo(QuoteReportFormatter().format(output))


@app.command()
def cutlist(
    config_file: ConfigOption = None,
    length: LengthOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    columns: ColumnsOption = None,
    rows: RowsOption = None,
) -> None:
    """Show rack dimensions and the cut list."""
    output = _run_quote(config_file, length, width, height, columns, rows)
    typer.echo(GeometryFormatter().format(output.geometry))
    typer.echo()
    typer.echo(CutListFormatter().format(output.cuts, output.totals))


@app.command()
def lumber(
    config_file: ConfigOption = None,
    length: LengthOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    columns: ColumnsOption = None,
    rows: RowsOption = None,
    choose: Annotated[
        list[str] | None,
        typer.Option("--choose", help="Force a board length for a cut, e.g. Runners=10"),
    ] = None,
) -> None:
    """Show board options per cut and what to buy."""
    output = _run_quote(config_file, length, width, height, columns, rows, choose=choose)
    typer.echo(LumberPlanFormatter().format(output.lumber))
    for warning in output.warnings:
        typer.echo(f"Warning: {warning}", err=True)


@app.command()
def price(
    columns: Annotated[int, typer.Argument(help="Bays across")],
    rows: Annotated[int, typer.Argument(help="Bays stacked")],
) -> None:
    """Look up or extrapolate the sale price for a layout.

    Example:
        toterack price 3 3
    """
    estimate = estimate_price(columns, rows)
    note = "" if estimate.exact else " (extrapolated)"
    typer.echo(f"{columns}x{rows}: {format_money(estimate.price)}{note}")


if __name__ == "__main__":
    app()
