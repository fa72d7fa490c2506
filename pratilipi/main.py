import json
from pathlib import Path
from typing import List, Optional

import typer
from rich import print, print_json
from rich.table import Table

from pratilipi.corpus import load_reference_ventures, select_internal_corpus
from pratilipi.errors import ConfigurationError, InvalidInputError
from pratilipi.factory import create_ai_service, create_analyzer, validate_provider
from pratilipi.models.idea import AnalyzeOptions, Idea
from pratilipi.utils.config import config

app = typer.Typer(help="Detect submitted ideas that duplicate known ventures or applications.")


def _read_json(path: Path):
    with open(path, 'r') as file:
        return json.load(file)


def _load_corpus(corpus_file: Optional[Path], internal: bool, exclude_owner: Optional[str],
                 category: Optional[str], limit: Optional[int]) -> List[Idea]:
    if corpus_file is None:
        return load_reference_ventures(config.reference_ventures_file, category=category, limit=limit)
    if corpus_file.suffix in (".yaml", ".yml"):
        return load_reference_ventures(corpus_file, category=category, limit=limit)

    applications = _read_json(corpus_file)
    if internal:
        return select_internal_corpus(applications, exclude_owner)
    return [Idea.model_validate(item) for item in applications]


@app.command()
def check(
    candidate_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file with the submitted idea"),
    corpus_file: Optional[Path] = typer.Option(None, "--corpus", exists=True, dir_okay=False,
                                               help="JSON list or ventures YAML to compare against"),
    internal: bool = typer.Option(False, "--internal", help="Treat the corpus as internal applications"),
    exclude_owner: Optional[str] = typer.Option(None, "--exclude-owner", help="Skip applications from this owner"),
    provider: Optional[str] = typer.Option(None, "--provider", help="gemini, openai or none"),
    category: Optional[str] = typer.Option(None, "--category", help="Filter reference ventures by category"),
    limit: Optional[int] = typer.Option(None, "--limit", help="Maximum number of reference ventures"),
):
    """Check one submitted idea for duplicates and print the verdict as JSON."""
    try:
        if provider is not None:
            validate_provider(provider)
        corpus = _load_corpus(corpus_file, internal, exclude_owner, category, limit)
        analyzer = create_analyzer(provider)
        verdict = analyzer.analyze(
            _read_json(candidate_file),
            corpus,
            AnalyzeOptions(exclude_owner_id=exclude_owner, internal_corpus_mode=internal),
        )
    except (InvalidInputError, ConfigurationError, ValueError) as e:
        print(f"[bold red]{e}[/bold red]")
        raise typer.Exit(code=1)

    print_json(verdict.model_dump_json())
    if verdict.recommendation.value == "REJECT":
        raise typer.Exit(code=2)


@app.command()
def ventures(
    category: Optional[str] = typer.Option(None, "--category", help="Industry or tag to filter by"),
    limit: Optional[int] = typer.Option(None, "--limit", help="Maximum number of ventures"),
):
    """List the reference ventures used as the external corpus."""
    try:
        entries = load_reference_ventures(config.reference_ventures_file, category=category, limit=limit)
    except ConfigurationError as e:
        print(f"[bold red]{e}[/bold red]")
        raise typer.Exit(code=1)

    table = Table(title=f"Reference ventures ({len(entries)})")
    table.add_column("Name", style="bold")
    table.add_column("One-liner")
    table.add_column("Industry")
    table.add_column("Tags")
    for entry in entries:
        table.add_row(entry.name, entry.oneLiner, entry.industry, ", ".join(entry.tags))
    print(table)


@app.command()
def doctor(provider: Optional[str] = typer.Option(None, "--provider", help="gemini, openai or none")):
    """Report whether AI-assisted analysis is available."""
    provider = provider or config.ai_provider
    try:
        ai_service = create_ai_service(provider)
    except ValueError as e:
        print(f"[bold red]{e}[/bold red]")
        raise typer.Exit(code=1)

    if ai_service is None:
        print("AI analysis is [bold yellow]disabled[/bold yellow]; the deterministic engine will be used.")
    elif ai_service.has_usable_credential():
        print(f"AI provider [bold green]{provider}[/bold green] is configured.")
    else:
        print(
            f"No usable API key for [bold red]{provider}[/bold red]. "
            "The deterministic engine will be used until one is configured."
        )


if __name__ == "__main__":
    app()
