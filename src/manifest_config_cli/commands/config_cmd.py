from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer
import tomli_w
from rich.console import Console
from rich.table import Table

from manifest_config_core import keys
from manifest_config_core.errors import ManifestConfigError
from manifest_config_core.loader import ManifestConfigLoader
from manifest_config_core.metadata import read_metadata

app = typer.Typer(help="Configuration inspection and validation")
console = Console()

_FORMATS = ("json", "toml")


def _strip_nulls(value: Any) -> Any:
    if isinstance(value, dict):
        cleaned: dict[str, Any] = {}
        for k, v in value.items():
            cleaned_v = _strip_nulls(v)
            if cleaned_v is not None:
                cleaned[k] = cleaned_v
        return cleaned
    if isinstance(value, list):
        return [_strip_nulls(item) for item in value if item is not None]
    return value


def _render(payload: dict[str, Any], fmt: str) -> str:
    if fmt == "json":
        return json.dumps(payload, indent=2, sort_keys=True)
    # TOML has no null
    return tomli_w.dumps(_strip_nulls(payload))


@app.command("show")
def config_show(
    path: Path = typer.Argument(..., help="Metadata file (.toml, .json or AndroidManifest .xml)"),
    api_key: str | None = typer.Option(
        None, "--api-key", help="API key override", envvar="MANIFEST_CONFIG_API_KEY"
    ),
    fmt: str = typer.Option("json", "--format", help="Output format: json|toml"),
):
    """Print the merged configuration."""
    fmt = fmt.lower()
    if fmt not in _FORMATS:
        raise typer.BadParameter("--format must be json or toml", param_hint="--format")

    try:
        config = ManifestConfigLoader.load_file(path, api_key)
    except ManifestConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(_render(config.to_dict(), fmt))


@app.command("validate")
def config_validate(
    path: Path = typer.Argument(..., help="Metadata file (.toml, .json or AndroidManifest .xml)"),
    api_key: str | None = typer.Option(
        None, "--api-key", help="API key override", envvar="MANIFEST_CONFIG_API_KEY"
    ),
):
    """Check that the metadata merges into a usable configuration."""
    try:
        data = read_metadata(path)
    except ManifestConfigError as e:
        typer.echo(f"✗ {e}", err=True)
        raise typer.Exit(1)

    result = ManifestConfigLoader.merge(data, api_key)
    if not result.ok:
        typer.echo(f"✗ {result.error}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Config is valid: {path}")


@app.command("keys")
def config_keys(
    path: Path = typer.Argument(..., help="Metadata file (.toml, .json or AndroidManifest .xml)"),
):
    """List namespaced metadata keys found in the source."""
    try:
        data = read_metadata(path)
    except ManifestConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    table = Table(title=f"Metadata keys: {path}")
    table.add_column("Key")
    table.add_column("Value")
    table.add_column("Status")

    for key in sorted(data):
        if not keys.is_namespaced(key):
            continue
        value = data[key]
        expected = keys.KEY_TYPES.get(key)
        if expected is None:
            status = "[yellow]unrecognised[/yellow]"
        elif key in keys.DEPRECATED_ALIASES:
            status = f"[yellow]deprecated, use {keys.DEPRECATED_ALIASES[key]}[/yellow]"
        elif value is not None and type(value) is not expected:
            status = f"[red]expected {expected.__name__}[/red]"
        else:
            status = "[green]ok[/green]"
        table.add_row(key, repr(value), status)

    console.print(table)
