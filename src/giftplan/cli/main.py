"""CLI entry point for giftplan."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import click

from giftplan.analytics.metrics import compute_summary
from giftplan.analytics.table import decimate
from giftplan.config.defaults import (
    default_input,
    default_second_gift,
    load_presets,
    preset_input,
)
from giftplan.config.schema import ProjectionInput, validate_input
from giftplan.core.engine import project
from giftplan.formatting.currency import DEFAULT_LOCALE, format_full, get_locale
from giftplan.io.serialize import dump_snapshots_csv, dump_summary, load_input
from giftplan.utils.exceptions import GiftplanError


@click.group()
@click.version_option(package_name="giftplan")
def cli() -> None:
    """giftplan — savings projection for gifts to a child's account."""


def _apply_overrides(base: ProjectionInput, overrides: dict[str, Any]) -> ProjectionInput:
    data = base.model_dump()
    gift_year = overrides.pop("second_gift_year")
    gift_amount = overrides.pop("second_gift_amount")
    data.update({key: val for key, val in overrides.items() if val is not None})
    if gift_year is not None or gift_amount is not None:
        current = data.get("second_gift") or default_second_gift().model_dump()
        data["second_gift"] = {
            "at_year": gift_year if gift_year is not None else current["at_year"],
            "amount": gift_amount if gift_amount is not None else current["amount"],
        }
    return validate_input(data)


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to JSON input file. Uses defaults if not provided.",
)
@click.option("--preset", default=None, help="Named scenario preset (see `giftplan presets`).")
@click.option("--initial-gift", default=None, type=float, help="Lump sum at year 0.")
@click.option("--monthly", default=None, type=float, help="Monthly contribution.")
@click.option("--rate", default=None, type=float, help="Annual return rate in percent.")
@click.option("--years", default=None, type=int, help="Number of years to project.")
@click.option("--second-gift-year", default=None, type=int, help="Year of the second gift.")
@click.option("--second-gift-amount", default=None, type=float, help="Second gift amount.")
@click.option("--locale", default=DEFAULT_LOCALE, show_default=True, help="Currency locale.")
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write summary JSON.",
)
@click.option(
    "--csv",
    "csv_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write yearly snapshots as CSV.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def run(
    config_path: Path | None,
    preset: str | None,
    initial_gift: float | None,
    monthly: float | None,
    rate: float | None,
    years: int | None,
    second_gift_year: int | None,
    second_gift_amount: float | None,
    locale: str,
    output_path: Path | None,
    csv_path: Path | None,
    verbose: bool,
) -> None:
    """Project a savings account year by year."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    try:
        loc = get_locale(locale)
        if config_path is not None:
            inp = load_input(config_path.read_text(encoding="utf-8"))
        else:
            inp = default_input()
        if preset is not None:
            inp = preset_input(preset, base=inp)

        # CLI overrides
        inp = _apply_overrides(
            inp,
            {
                "initial_gift": initial_gift,
                "monthly_contribution": monthly,
                "annual_return_rate_percent": rate,
                "target_age_years": years,
                "second_gift_year": second_gift_year,
                "second_gift_amount": second_gift_amount,
            },
        )
        snapshots = project(inp)
    except GiftplanError as exc:
        raise click.UsageError(str(exc)) from exc

    summary = compute_summary(snapshots)

    click.echo(
        f"Projected asset at year {summary.final_year}: "
        f"{format_full(summary.total_asset, loc)}"
    )
    click.echo(
        f"Contributed: {format_full(summary.total_contributed, loc)}  "
        f"Profit: {format_full(summary.profit, loc)} (+{summary.profit_ratio_percent:.1f}%)"
    )
    click.echo(
        f"Split: {summary.contributed_fraction:.1%} contributed / "
        f"{summary.profit_fraction:.1%} profit"
    )
    click.echo("")
    click.echo(f"{'Year':>4}  {'Contributed':>14}  {'Asset':>14}  {'Profit':>14}")
    for s in decimate(snapshots):
        marker = "  gift" if s.is_gift_year else ""
        click.echo(
            f"{s.year:>4}  {format_full(s.total_contributed, loc):>14}  "
            f"{format_full(s.total_asset, loc):>14}  +{format_full(s.profit, loc):>13}{marker}"
        )

    if output_path is not None:
        output_path.write_text(dump_summary(summary, inp), encoding="utf-8")
        click.echo(f"\nSummary written to {output_path}")
    if csv_path is not None:
        csv_path.write_text(dump_snapshots_csv(snapshots), encoding="utf-8")
        click.echo(f"Snapshots written to {csv_path}")


@cli.command()
def presets() -> None:
    """List the bundled scenario presets."""
    for name, preset in load_presets().items():
        click.echo(f"{name:<10} {preset.label}: {preset.description}")


if __name__ == "__main__":
    cli()
