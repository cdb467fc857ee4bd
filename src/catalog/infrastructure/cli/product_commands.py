"""CLI commands for the Product aggregate."""

from __future__ import annotations

import functools
import json
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import (
    UNSET,
    ProductCreateDTO,
    ProductDTO,
    ProductUpdateDTO,
)
from catalog.application.list_products import ListProductsHandler
from catalog.application.search_products import SearchProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException, RecordStoreError
from catalog.infrastructure.bootstrap import product_repository
from catalog.infrastructure.config import Settings

logger = logging.getLogger(__name__)

# Exit status for server-side failures, kept apart from click's 1 (caller
# error) and 2 (usage error) so scripts can decide whether to retry.
STORE_FAULT_EXIT_CODE = 3


def _store_faults(command: Callable[..., None]) -> Callable[..., None]:
    """Report record store failures as a fault instead of a caller error."""

    @functools.wraps(command)
    def wrapper(*args: Any, **kwargs: Any) -> None:
        try:
            command(*args, **kwargs)
        except RecordStoreError as exc:
            logger.error("Record store failure: %s", exc, exc_info=True)
            click.echo(f"Error: record store unavailable: {exc}", err=True)
            click.get_current_context().exit(STORE_FAULT_EXIT_CODE)

    return wrapper


def _parse_price(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> Decimal | None:
    if value is None:
        return None
    try:
        price = Decimal(value)
    except InvalidOperation:
        raise click.BadParameter(f"'{value}' is not a number.")
    if not price.is_finite() or price < 0:
        raise click.BadParameter("Price must be zero or greater.")
    return price


def _not_found(product_id: int) -> click.ClickException:
    return click.ClickException(f"Product #{product_id} not found")


# --- Rendering ----------------------------------------------------------------


def _echo_table(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Price':>12} {'Stock':>7}")
    click.echo("-" * 52)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<24} {p.price:>12.2f} {p.stock:>7}")


def _echo_detail(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id}")
    click.echo(f"Name:        {dto.name}")
    click.echo(f"Description: {dto.description if dto.description is not None else '-'}")
    click.echo(f"Price:       {dto.price:.2f}")
    click.echo(f"Stock:       {dto.stock}")
    click.echo(f"Created:     {dto.created_date:%Y-%m-%d %H:%M %Z}".rstrip())
    click.echo(f"Active:      {'yes' if dto.is_active else 'no'}")


def _echo_json(payload: object) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


json_option = click.option(
    "--json", "as_json", is_flag=True, help="Print the result as JSON."
)


# --- Commands -----------------------------------------------------------------


@click.command("list")
@json_option
@click.pass_obj
@_store_faults
def product_list(settings: Settings, as_json: bool) -> None:
    """List all active products, ordered by name."""
    handler = ListProductsHandler(product_repo=product_repository(settings))
    products = handler.handle()

    if as_json:
        _echo_json([p.to_dict() for p in products])
    else:
        _echo_table(products)


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@json_option
@click.pass_obj
@_store_faults
def product_show(settings: Settings, product_id: int, as_json: bool) -> None:
    """Show a single active product."""
    handler = ShowProductHandler(product_repo=product_repository(settings))
    dto = handler.handle(product_id)
    if dto is None:
        raise _not_found(product_id)

    if as_json:
        _echo_json(dto.to_dict())
    else:
        _echo_detail(dto)


@click.command("add")
@click.option("--name", required=True, help="Product name (unique).")
@click.option("--description", default=None, help="Optional description.")
@click.option("--price", required=True, callback=_parse_price, help="Price (e.g. 1200.00).")
@click.option("--stock", required=True, type=click.IntRange(min=0), help="Units on hand.")
@click.option("--active/--inactive", "is_active", default=True, show_default=True)
@json_option
@click.pass_obj
@_store_faults
def product_add(
    settings: Settings,
    name: str,
    description: str | None,
    price: Decimal,
    stock: int,
    is_active: bool,
    as_json: bool,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(settings))
    request = ProductCreateDTO(
        name=name,
        description=description,
        price=price,
        stock=stock,
        is_active=is_active,
    )

    try:
        dto = handler.handle(request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        _echo_json(dto.to_dict())
    else:
        click.echo(f"Product #{dto.id} '{dto.name}' added at {dto.price:.2f}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name (blank values are ignored).")
@click.option("--description", default=None, help="New description ('' empties it).")
@click.option("--clear-description", is_flag=True, help="Remove the description.")
@click.option("--price", default=None, callback=_parse_price, help="New price.")
@click.option("--stock", default=None, type=click.IntRange(min=0), help="New stock level.")
@click.option("--active/--inactive", "is_active", default=None)
@json_option
@click.pass_obj
@_store_faults
def product_update(
    settings: Settings,
    product_id: int,
    name: str | None,
    description: str | None,
    clear_description: bool,
    price: Decimal | None,
    stock: int | None,
    is_active: bool | None,
    as_json: bool,
) -> None:
    """Update selected fields of an active product."""
    if clear_description and description is not None:
        raise click.UsageError("--description and --clear-description are exclusive.")

    if clear_description:
        new_description: object = None
    elif description is not None:
        new_description = description
    else:
        new_description = UNSET

    request = ProductUpdateDTO(
        name=UNSET if name is None else name,
        description=new_description,
        price=UNSET if price is None else price,
        stock=UNSET if stock is None else stock,
        is_active=UNSET if is_active is None else is_active,
    )
    handler = UpdateProductHandler(product_repo=product_repository(settings))

    try:
        dto = handler.handle(product_id, request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is None:
        raise _not_found(product_id)

    if as_json:
        _echo_json(dto.to_dict())
    else:
        click.echo(f"Product #{dto.id} updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
@_store_faults
def product_delete(settings: Settings, product_id: int) -> None:
    """Deactivate a product. Repeating the call is harmless."""
    handler = DeleteProductHandler(product_repo=product_repository(settings))
    if not handler.handle(product_id):
        raise _not_found(product_id)

    click.echo(f"Product #{product_id} deleted")


@click.command("search")
@click.argument("term")
@json_option
@click.pass_obj
@_store_faults
def product_search(settings: Settings, term: str, as_json: bool) -> None:
    """Find active products whose name or description contains TERM."""
    handler = SearchProductsHandler(product_repo=product_repository(settings))

    try:
        products = handler.handle(term)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        _echo_json([p.to_dict() for p in products])
    else:
        _echo_table(products)
