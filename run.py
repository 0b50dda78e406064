import logging

import typer

from linkcrawl import config
from linkcrawl.exceptions import InvalidInputError
from linkcrawl.report import format_report
from linkcrawl.services.crawler import Crawler, crawl_webpage

app = typer.Typer(add_completion=False, name="linkcrawl")


@app.command()
def main(
    url: str = typer.Option(config.DEFAULT_URL, "--url", help="the url that you want to crawl"),
    depth: int = typer.Option(config.DEFAULT_DEPTH, "--depth", help="the maximum number of links deep to traverse"),
) -> None:
    """Crawl a site and print every same-site link it can reach."""
    logging.basicConfig(
        level=config.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        links = crawl_webpage(url, depth, crawler=Crawler())
    except InvalidInputError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(format_report(links), nl=False)


if __name__ == '__main__':
    app()
