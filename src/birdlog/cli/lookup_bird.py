"""CLI command for looking up a bird's Swedish and Latin names."""

import asyncio
import json
import sys

import click

from birdlog.lookup.models import MediaInfo, ResolvedName
from birdlog.system.structlog_configurator import configure_structlog
from birdlog.web.core.container import Container


@click.command()
@click.argument("term")
@click.option(
    "--media",
    is_flag=True,
    help="Also look up a photo and Wikipedia article",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the result as JSON",
)
def lookup_bird(term: str, media: bool, as_json: bool) -> None:
    """Look up the Swedish and Latin names of a bird.

    TERM may be a Swedish name, a Latin name or part of either.

    Examples:
        # Swedish to Latin
        lookup-bird knölsvan

        # Latin to Swedish, with photo and article
        lookup-bird "Sula nebouxii" --media
    """
    found = asyncio.run(_lookup_bird_async(term, media, as_json))
    if not found:
        sys.exit(1)


async def _lookup_bird_async(term: str, media: bool, as_json: bool) -> bool:
    """Async implementation of the lookup. Returns whether a name was found."""
    container = Container()
    configure_structlog(container.config())

    try:
        result = await container.bird_lookup().lookup_bird(term)

        media_info = None
        if media and result is not None:
            media_info = await container.media_resolver().resolve(
                result.latin_name, result.swedish_name
            )
    finally:
        await container.http_client().aclose()

    if as_json:
        click.echo(json.dumps(_as_dict(result, media_info), ensure_ascii=False))
    else:
        _display_result(term, result, media_info)

    return result is not None


def _as_dict(result: ResolvedName | None, media_info: MediaInfo | None) -> dict:
    """Build the JSON output structure."""
    output: dict = {
        "found": result is not None,
        "swedish_name": result.swedish_name if result else None,
        "latin_name": result.latin_name if result else None,
    }
    if media_info is not None:
        output["image_url"] = media_info.image_url
        output["full_image_url"] = media_info.full_image_url
        output["wiki_url"] = media_info.wiki_url
    return output


def _display_result(term: str, result: ResolvedName | None, media_info: MediaInfo | None) -> None:
    """Display the lookup result in a user-friendly format."""
    if result is None:
        click.echo(click.style(f"No match found for '{term}'", fg="yellow"))
        return

    click.echo(click.style(result.display_name, fg="green", bold=True))
    click.echo(f"  Swedish name: {result.swedish_name or '-'}")
    click.echo(f"  Latin name:   {result.latin_name or '-'}")

    if media_info is not None:
        click.echo(f"  Image:        {media_info.image_url or '-'}")
        click.echo(f"  Wikipedia:    {media_info.wiki_url or '-'}")


def main() -> None:
    """Entry point for the lookup-bird command."""
    lookup_bird()


if __name__ == "__main__":
    main()
