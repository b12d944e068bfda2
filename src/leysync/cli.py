"""CLI entry point using Typer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any

import typer

app = typer.Typer(
    name="leysync",
    help="Convert HoYoLAB Genshin character data to GOOD v3.",
    no_args_is_help=True,
)


def _read_payload(path: Path) -> dict[str, Any]:
    from leysync.errors import InvalidPayloadError
    from leysync.pipeline.parser import is_valid_genshin_data

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        typer.echo(f"Error: file not found: {path}", err=True)
        raise typer.Exit(1) from None
    except json.JSONDecodeError as exc:
        typer.echo(f"Error: {path} contains invalid JSON: {exc}", err=True)
        raise typer.Exit(1) from None

    if not is_valid_genshin_data(raw):
        retcode = raw.get("retcode") if isinstance(raw, dict) else None
        message = raw.get("message") if isinstance(raw, dict) else None
        msg = f"not a successful character detail response (retcode={retcode!r}, message={message!r})"
        raise InvalidPayloadError(msg)
    return raw


@app.command()
def convert(
    raw_path: Annotated[Path, typer.Argument(help="Raw HoYoLAB character detail JSON")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write GOOD JSON here instead of stdout"),
    ] = None,
    remove_manekin: Annotated[
        bool | None,
        typer.Option("--remove-manekin/--keep-manekin", help="Drop Manekin/Manekina"),
    ] = None,
    traveler_element: Annotated[
        bool | None,
        typer.Option(
            "--traveler-element/--no-traveler-element",
            help="Append the element to the Traveler key",
        ),
    ] = None,
    min_level: Annotated[
        int | None,
        typer.Option("--min-level", "-m", min=0, help="Drop characters below this level"),
    ] = None,
    skip_invalid: Annotated[
        bool | None,
        typer.Option("--skip-invalid/--strict", help="Skip unconvertible entries"),
    ] = None,
    validate: Annotated[
        bool | None,
        typer.Option("--validate/--no-validate", help="Check output against the GOOD schema"),
    ] = None,
) -> None:
    """Convert a raw HoYoLAB response to a GOOD v3 document."""
    import jsonschema
    from pydantic import ValidationError

    from leysync.config import load_config
    from leysync.errors import LeysyncError
    from leysync.pipeline.convert import convert_to_good
    from leysync.validation import validate_good_json

    config = load_config()
    options = config.export.to_options(
        remove_manekin=remove_manekin,
        add_traveler_element_to_key=traveler_element,
        min_character_level=min_level,
    )
    skip = config.skip_invalid if skip_invalid is None else skip_invalid

    try:
        raw = _read_payload(raw_path)
        document = convert_to_good(raw, options, skip_invalid=skip)
    except (LeysyncError, ValidationError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from None

    data = document.to_dict()
    if config.validate_output if validate is None else validate:
        try:
            validate_good_json(data)
        except jsonschema.ValidationError as exc:
            typer.echo(f"Error: output is not valid GOOD: {exc.message}", err=True)
            raise typer.Exit(1) from None

    text = json.dumps(data, indent=2, ensure_ascii=False)
    if output is None:
        typer.echo(text)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
        typer.echo(
            f"Wrote {len(document.characters)} characters, {len(document.weapons)} weapons, "
            f"{len(document.artifacts)} artifacts to {output}"
        )


@app.command()
def inspect(
    raw_path: Annotated[Path, typer.Argument(help="Raw HoYoLAB character detail JSON")],
) -> None:
    """List the characters of a raw response as the parser sees them."""
    from pydantic import ValidationError

    from leysync.errors import LeysyncError
    from leysync.pipeline.parser import parse_genshin_data

    try:
        data = parse_genshin_data(_read_payload(raw_path))
    except (LeysyncError, ValidationError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from None

    if data.user.uid:
        typer.echo(f"UID {data.user.uid} ({data.user.server})")
    for char in data.characters:
        talents = "/".join(
            str(t.base_level) for t in char.talents if not t.is_alternate_sprint
        )
        typer.echo(
            f"{char.name}: Lv.{char.level} A{char.ascension} "
            f"C{char.active_constellations} talents {talents}"
        )


@app.callback(invoke_without_command=True)
def main(
    version: Annotated[
        bool, typer.Option("--version", "-v", help="Show version")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log conversion details to stderr")
    ] = False,
) -> None:
    """leysync - HoYoLAB Genshin data to GOOD v3 converter."""
    if version:
        from leysync import __version__

        typer.echo(f"leysync {__version__}")
        raise typer.Exit()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
