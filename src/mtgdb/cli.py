"""CLI entry point for mtgdb package."""
from __future__ import annotations

import json
import logging
from typing import Any, Optional, Tuple

import click

from .client import MtgDbClient
from .config import ENV_API_URL, load_settings
from .errors import MtgDbError


def _to_jsonable(result: Any) -> Any:
    if result is None:
        return None
    if isinstance(result, list):
        return [_to_jsonable(r) for r in result]
    if hasattr(result, "model_dump"):
        return result.model_dump(mode="json", by_alias=True)
    return result


def _emit(ctx: click.Context, method: str, *args: Any, **kwargs: Any) -> None:
    client: MtgDbClient = ctx.obj
    try:
        result = getattr(client, method)(*args, **kwargs)
    except MtgDbError as e:
        raise click.ClickException(str(e)) from e
    click.echo(json.dumps(_to_jsonable(result), indent=2, ensure_ascii=False))


@click.group()
@click.option("--base-url", envvar=ENV_API_URL, help="mtgdb.info API root (defaults to the public API).")
@click.option("--timeout", type=float, default=None, help="Seconds to wait for each response.")
@click.option("--verbose", "-v", is_flag=True, help="Log every request.")
@click.pass_context
def main(ctx: click.Context, base_url: Optional[str], timeout: Optional[float], verbose: bool) -> None:
    """mtgdb.info card database command-line tool."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        )
    try:
        settings = load_settings(base_url=base_url, timeout=timeout)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    ctx.obj = ctx.with_resource(MtgDbClient(settings=settings))


@main.command("card")
@click.argument("multiverse_id", type=int)
@click.pass_context
def card_cmd(ctx: click.Context, multiverse_id: int) -> None:
    """Show the card with MULTIVERSE_ID."""
    _emit(ctx, "get_card", multiverse_id)


@main.command("random")
@click.option("--set", "set_id", help="Pick from this set only.")
@click.pass_context
def random_cmd(ctx: click.Context, set_id: Optional[str]) -> None:
    """Show a random card."""
    if set_id:
        _emit(ctx, "get_random_card_in_set", set_id)
    else:
        _emit(ctx, "get_random_card")


@main.command("cards")
@click.argument("name", required=False)
@click.option("--id", "ids", type=int, multiple=True, help="Multiverse id; repeat for several.")
@click.pass_context
def cards_cmd(ctx: click.Context, name: Optional[str], ids: Tuple[int, ...]) -> None:
    """List printings of NAME, the cards with the given --id values, or every card."""
    if name is not None and ids:
        raise click.UsageError("Pass either NAME or --id, not both.")
    if ids:
        _emit(ctx, "get_cards_by_ids", list(ids))
    elif name is not None:
        _emit(ctx, "get_cards_by_name", name)
    else:
        _emit(ctx, "get_all_cards")


@main.command("filter")
@click.argument("prop", metavar="PROPERTY")
@click.argument("value")
@click.pass_context
def filter_cmd(ctx: click.Context, prop: str, value: str) -> None:
    """List cards whose PROPERTY equals VALUE."""
    _emit(ctx, "filter_cards", prop, value)


@main.command("set-cards")
@click.argument("set_id", metavar="SET")
@click.option("--start", default=0, show_default=True, help="First set number (1-based).")
@click.option("--end", default=0, show_default=True, help="Last set number, inclusive.")
@click.pass_context
def set_cards_cmd(ctx: click.Context, set_id: str, start: int, end: int) -> None:
    """List the cards in SET."""
    _emit(ctx, "get_set_cards", set_id, start, end)


@main.command("card-in-set")
@click.argument("set_id", metavar="SET")
@click.argument("number", type=int)
@click.pass_context
def card_in_set_cmd(ctx: click.Context, set_id: str, number: int) -> None:
    """Show card NUMBER of SET."""
    _emit(ctx, "get_card_in_set", set_id, number)


@main.command("set")
@click.argument("set_id", metavar="SET")
@click.pass_context
def set_cmd(ctx: click.Context, set_id: str) -> None:
    """Show the set with code SET."""
    _emit(ctx, "get_set", set_id)


@main.command("sets")
@click.argument("set_ids", metavar="[SET]...", nargs=-1)
@click.pass_context
def sets_cmd(ctx: click.Context, set_ids: Tuple[str, ...]) -> None:
    """Show the given sets, or every set."""
    _emit(ctx, "get_sets", list(set_ids) if set_ids else None)


@main.command("search")
@click.argument("text")
@click.option("--start", default=0, show_default=True)
@click.option("--limit", default=0, show_default=True)
@click.option("--complex", "is_complex", is_flag=True, help="TEXT is a query expression, sent URL-encoded.")
@click.pass_context
def search_cmd(ctx: click.Context, text: str, start: int, limit: int, is_complex: bool) -> None:
    """Search cards for TEXT."""
    _emit(ctx, "search", text, start=start, limit=limit, is_complex=is_complex)


@main.command("rarities")
@click.pass_context
def rarities_cmd(ctx: click.Context) -> None:
    """List card rarities."""
    _emit(ctx, "get_card_rarity_types")


@main.command("types")
@click.pass_context
def types_cmd(ctx: click.Context) -> None:
    """List card types."""
    _emit(ctx, "get_card_types")


@main.command("subtypes")
@click.pass_context
def subtypes_cmd(ctx: click.Context) -> None:
    """List card subtypes."""
    _emit(ctx, "get_card_sub_types")


if __name__ == "__main__":
    main()
