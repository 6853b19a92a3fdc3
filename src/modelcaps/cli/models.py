"""CLI commands: modelcaps models list / show."""

from __future__ import annotations

import json
import sys

import click

from modelcaps.errors import CatalogError
from modelcaps.index import CapabilityIndex, load_index
from modelcaps.types import ModelCapability, ModelProvider


def _load() -> CapabilityIndex:
    try:
        return load_index()
    except CatalogError as exc:
        click.echo(f"Invalid model catalog: {exc}", err=True)
        sys.exit(1)


def _describe(model: ModelCapability) -> list[str]:
    features = ", ".join(sorted(model.features)) or "none"
    lines = [
        f"{model.description}",
        f"  key:                      {model.composite_key}",
        f"  model name:               {model.model_name}",
        f"  max tokens:               {model.max_tokens}",
        f"  max output tokens:        {model.max_output_tokens}",
        f"  reserved output tokens:   {model.reserved_output_tokens}",
        f"  effective input limit:    {model.effective_input_limit}",
        f"  default max convo tokens: {model.default_max_convo_tokens}",
        f"  output format:            {model.preferred_output_format}",
        f"  api key env var:          {model.api_key_env_var}",
        f"  base url:                 {model.base_url}",
        f"  features:                 {features}",
    ]
    if model.reasoning_effort is not None:
        lines.append(f"  reasoning effort:         {model.reasoning_effort}")
    return lines


@click.group()
def models() -> None:
    """Inspect the model capability catalog."""


@models.command("list")
@click.option(
    "--provider",
    type=click.Choice([p.value for p in ModelProvider]),
    default=None,
    help="Only list models from this provider",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Output JSON")
def list_command(provider: str | None, as_json: bool) -> None:
    """List available models in catalog order."""
    index = _load()
    entries = index.list_models(provider)

    if as_json:
        click.echo(json.dumps([m.to_dict() for m in entries], indent=2))
        return

    if not entries:
        click.echo("No models found.")
        return

    width = max(len(m.composite_key) for m in entries)
    for m in entries:
        click.echo(
            f"{m.composite_key:<{width}}  {m.effective_input_limit:>8}  {m.description}"
        )


@models.command("show")
@click.argument("provider")
@click.argument("model_id")
@click.option("--json", "as_json", is_flag=True, default=False, help="Output JSON")
def show_command(provider: str, model_id: str, as_json: bool) -> None:
    """Show the capabilities of PROVIDER/MODEL_ID."""
    index = _load()
    model = index.lookup(provider, model_id)
    if model is None:
        click.echo(f"Model not found: {provider}/{model_id}", err=True)
        sys.exit(1)

    if as_json:
        payload = model.to_dict()
        payload["effective_input_limit"] = model.effective_input_limit
        click.echo(json.dumps(payload, indent=2))
        return

    for line in _describe(model):
        click.echo(line)
