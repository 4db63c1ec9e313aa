from dataclasses import dataclass


@dataclass(frozen=True)
class ValidateRequestDTO:
    value: str | bytes | int | None
    kind: str = "auto"  # auto|cpf|cnpj


@dataclass(frozen=True)
class FormatRequestDTO:
    value: str
    kind: str = "auto"
    masked: bool = True


@dataclass(frozen=True)
class GenerateRequestDTO:
    kind: str = "cpf"
    count: int = 1
    seed: int | None = None
