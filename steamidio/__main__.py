import logging
import platform

import typer
import yarl

import steamidio

app = typer.Typer(help="Convert Steam IDs between their formats.", add_completion=False)


def _parse(value: str) -> steamidio.ID:
    try:
        id = steamidio.parse_id(value)
        id.info()
    except steamidio.InvalidID as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(1) from None
    return id


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log what the converters are doing."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s:%(name)s: %(message)s")
    if ctx.invoked_subcommand is None:
        typer.echo(f"python version: {platform.python_version()}")
        typer.echo(f"steamidio version: {steamidio.__version__}")
        typer.echo(f"yarl version: {yarl.__version__}")
        typer.echo(f"typer version: {typer.__version__}")
        typer.echo(f"operating system info: {platform.platform()}")


@app.command()
def convert(ids: list[str] = typer.Argument(..., help="IDs in the 64-bit, ID32 or ID3 format.")) -> None:
    """Print every ID in all three formats."""
    for value in ids:
        id = _parse(value)
        typer.echo(f"{id.id64()} {id.id32()} {id.id3()}")


@app.command()
def info(id: str = typer.Argument(..., help="An ID in the 64-bit, ID32 or ID3 format.")) -> None:
    """Print the fields packed into an ID."""
    fields = _parse(id).id64().info()
    typer.echo(f"universe: {fields.universe.display_name}")
    typer.echo(f"type: {fields.type.display_name}")
    typer.echo(f"instance: {fields.instance}")
    typer.echo(f"account: {fields.account}")
    typer.echo(f"authentication server: {fields.authentication_server}")


@app.command()
def url(id: str = typer.Argument(..., help="An ID in the 64-bit, ID32 or ID3 format.")) -> None:
    """Print the steamid.co profile lookup URL of an ID."""
    typer.echo(steamidio.build_profile_lookup_url(_parse(id)))


if __name__ == "__main__":
    app()
