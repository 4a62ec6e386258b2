import pydantic
import typer
from typing import Optional

from .config import load_config
from .exceptions import InvalidIdentifier
from .fields import model_fields_schema
from .ids import parse_id
from .model import NoteData

app = typer.Typer()


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option("", envvar="notedata_log_level"),
    log_format: str = typer.Option("", envvar="notedata_log_format"),
) -> None:
    overrides = {}
    if log_level:
        overrides["log_level"] = log_level
    if log_format:
        overrides["log_format"] = log_format
    try:
        ctx.obj = load_config(**overrides)
    except pydantic.ValidationError as e:
        for error in e.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            typer.secho(f"invalid {field}: {error['msg']}", fg=typer.colors.RED)
        raise typer.Exit(1)


@app.command()
def new(
    name: str = typer.Option(...),
    description: Optional[str] = typer.Option(None),
    image: Optional[str] = typer.Option(None),
    id: Optional[str] = typer.Option(None),
) -> None:
    builder = NoteData.builder().name(name).description(description).image(image)
    if id is not None:
        try:
            builder = builder.id(id)
        except InvalidIdentifier as e:
            typer.secho(f"{e} ({e.__cause__})", fg=typer.colors.RED)
            raise typer.Exit(1)
    typer.echo(str(builder.build()))


@app.command()
def check_id(value: str) -> None:
    check = parse_id(value)
    if check.ok:
        typer.secho("valid", fg=typer.colors.GREEN)
    else:
        typer.secho(f"invalid: {check.error}", fg=typer.colors.RED)
        raise typer.Exit(1)


@app.command()
def schema() -> None:
    config = NoteData.auth_config()
    typer.secho(config.plural_name, fg=typer.colors.GREEN)
    for field in model_fields_schema(NoteData).values():
        status = "required" if field.required else "optional"
        typer.echo(f"  {field.name}: {field.target_type} ({status})")
    typer.secho("auth rules", fg=typer.colors.GREEN)
    for rule in config.auth_rules:
        typer.echo(f"  {rule}")


if __name__ == "__main__":
    app()
