#!/usr/bin/env python3
"""
Invoice Terms CLI

Show preset term sets and compute the invoice schedule of a term set file.
"""

from pathlib import Path
from typing import Any

import click
import yaml

from ..core.config import get_config
from ..core.currency import format_currency
from ..core.json_utils import format_json
from ..terms import (
    PRESET_LABELS,
    TRIGGER_LABELS,
    InvoiceTerm,
    PresetType,
    build_term_schedule,
    calculate_total_invoiced_from_terms,
    calculate_uninvoiced_revenue,
    get_locked_trigger_description,
    get_preset_terms,
    get_term_status_label,
    has_any_invoiced_term,
    validate_terms,
)
from ..terms.models import TermStatus


def load_terms_file(path: Path) -> list[InvoiceTerm]:
    """
    Load a term set from a YAML or JSON file.

    The file holds either a list of terms or a mapping with a ``terms`` key.

    Raises:
        click.ClickException: If the file cannot be parsed into terms
    """
    with open(path, encoding="utf-8") as f:
        data: Any = yaml.safe_load(f)

    if isinstance(data, dict):
        data = data.get("terms")
    if not isinstance(data, list):
        raise click.ClickException(f"{path} must contain a list of terms or a 'terms' key")

    try:
        return [InvoiceTerm.from_dict(item) for item in data]
    except (KeyError, TypeError, ValueError) as e:
        raise click.ClickException(f"Invalid term in {path}: {e}")


@click.group()
def terms() -> None:
    """Invoice term planning commands."""
    pass


@terms.command()
@click.argument("preset", type=click.Choice([p.value for p in PresetType]))
@click.option("--revenue", type=float, default=0.0, help="Job order revenue in base currency")
def preset(preset: str, revenue: float) -> None:
    """
    Show the terms of a preset with their invoice amounts.

    Example:
      freight-finance terms preset dp_final --revenue 10000000
    """
    config = get_config()
    currency = config.invoicing.base_currency
    preset_type = PresetType(preset)

    click.echo(PRESET_LABELS[preset_type])
    preset_terms = get_preset_terms(preset_type)
    if not preset_terms:
        click.echo("Custom term sets start empty; add terms totalling 100%.")
        return

    schedule = build_term_schedule(
        preset_terms, revenue, "draft", tax_rate=config.invoicing.default_tax_rate
    )
    for entry in schedule:
        click.echo(
            f"  {entry.term.term:<14} {entry.term.percentage:>6g}%  "
            f"{TRIGGER_LABELS[entry.term.trigger]:<13} "
            f"subtotal {format_currency(entry.totals.subtotal, currency)}  "
            f"total {format_currency(entry.totals.total_amount, currency)}"
        )


@terms.command()
@click.argument("terms_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--revenue", type=float, required=True, help="Job order revenue in base currency")
@click.option("--jo-status", default="draft", help="Current job order status")
@click.option("--surat-jalan", is_flag=True, help="A Surat Jalan document exists")
@click.option("--berita-acara", is_flag=True, help="A Berita Acara document exists")
@click.option("--json", "as_json", is_flag=True, help="Output the schedule as JSON")
def schedule(
    terms_file: Path,
    revenue: float,
    jo_status: str,
    surat_jalan: bool,
    berita_acara: bool,
    as_json: bool,
) -> None:
    """
    Show the status and invoice totals of each term in TERMS_FILE.

    Example:
      freight-finance terms schedule terms.yaml --revenue 10000000 --jo-status completed
    """
    config = get_config()
    currency = config.invoicing.base_currency
    tax_rate = config.invoicing.default_tax_rate
    term_set = load_terms_file(terms_file)

    validation = validate_terms(term_set, config.invoicing.percentage_tolerance)
    if not validation.is_valid:
        for error in validation.errors:
            click.echo(f"  {error.field}: {error.message}", err=True)
        raise click.ClickException("Term set is not valid for invoicing")

    entries = build_term_schedule(term_set, revenue, jo_status, surat_jalan, berita_acara, tax_rate)
    invoiced_total = calculate_total_invoiced_from_terms(term_set, revenue, tax_rate)
    uninvoiced_amount, uninvoiced_percent = calculate_uninvoiced_revenue(term_set, revenue)

    if as_json:
        click.echo(
            format_json(
                {
                    "terms": [entry.to_dict() for entry in entries],
                    "total_invoiced": invoiced_total,
                    "uninvoiced_amount": uninvoiced_amount,
                    "uninvoiced_percent": uninvoiced_percent,
                    "locked_for_edit": has_any_invoiced_term(term_set),
                }
            )
        )
        return

    click.echo(f"Invoice Schedule (JO status: {jo_status})")
    click.echo("=" * 60)
    for entry in entries:
        click.echo(
            f"{entry.term.term} ({entry.term.percentage:g}%) - {get_term_status_label(entry.status)}"
        )
        click.echo(f"  Subtotal: {format_currency(entry.totals.subtotal, currency)}")
        click.echo(f"  VAT:      {format_currency(entry.totals.vat_amount, currency)}")
        click.echo(f"  Total:    {format_currency(entry.totals.total_amount, currency)}")
        if entry.status == TermStatus.LOCKED:
            click.echo(f"  {get_locked_trigger_description(entry.term.trigger)}")

    click.echo("-" * 60)
    click.echo(f"Total invoiced: {format_currency(invoiced_total, currency)}")
    click.echo(f"Uninvoiced: {format_currency(uninvoiced_amount, currency)} ({uninvoiced_percent:g}%)")
    if has_any_invoiced_term(term_set):
        click.echo("Term set is locked for editing (a term has been invoiced)")
