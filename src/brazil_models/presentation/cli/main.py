from typing import NoReturn, Optional

import typer

from brazil_models.application.dtos.requests import (
    FormatRequestDTO,
    GenerateRequestDTO,
    ValidateRequestDTO,
)
from brazil_models.application.use_cases.format_document import FormatDocumentUseCase
from brazil_models.application.use_cases.generate_document import GenerateDocumentUseCase
from brazil_models.application.use_cases.validate_document import ValidateDocumentUseCase
from brazil_models.config import configure_logging, settings
from brazil_models.domain.errors import DocumentError

app = typer.Typer(help="Brazilian CPF/CNPJ tools")

@app.callback()
def main(log_level: str = typer.Option(settings.log_level, "--log-level")) -> None:
    configure_logging(log_level)


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


def _masked(mask: Optional[bool]) -> bool:
    # flag left out falls back to BRAZIL_MODELS_MASK_OUTPUT
    return settings.mask_output if mask is None else mask


@app.command()
def validate(
    value: str,
    kind: str = typer.Option("auto", "--kind", "-k"),
    mask: Optional[bool] = typer.Option(None, "--mask/--no-mask"),
) -> None:
    try:
        result = ValidateDocumentUseCase().execute(ValidateRequestDTO(value=value, kind=kind))
    except DocumentError as e:
        _fail(str(e))
    if not result.valid:
        _fail(f"Invalid document: {value}")
    typer.echo(f"{result.kind} {result.masked if _masked(mask) else result.value}")


@app.command("format")
def format_(
    value: str,
    kind: str = typer.Option("auto", "--kind", "-k"),
    mask: Optional[bool] = typer.Option(None, "--mask/--no-mask"),
) -> None:
    try:
        out = FormatDocumentUseCase().execute(
            FormatRequestDTO(value=value, kind=kind, masked=_masked(mask))
        )
    except DocumentError as e:
        _fail(str(e))
    typer.echo(out)


@app.command()
def generate(
    kind: str = typer.Option("cpf", "--kind", "-k"),
    count: int = typer.Option(1, "--count", "-n"),
    seed: Optional[int] = typer.Option(None, "--seed"),
    mask: Optional[bool] = typer.Option(None, "--mask/--no-mask"),
) -> None:
    try:
        docs = GenerateDocumentUseCase().execute(GenerateRequestDTO(kind=kind, count=count, seed=seed))
    except DocumentError as e:
        _fail(str(e))
    for doc in docs:
        typer.echo(doc.masked if _masked(mask) else doc.value)
