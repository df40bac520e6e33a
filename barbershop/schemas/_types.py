from __future__ import annotations

from typing import Annotated, Optional
from urllib.parse import urlsplit

from fastapi import Path
from pydantic import AfterValidator, Field, validate_email

# faixa do INTEGER do SQLite
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


def _validate_url(value: str) -> str:
    parts = urlsplit(value)
    if not parts.scheme or not parts.netloc:
        raise ValueError("Invalid url")
    return value


def _validate_email(value: str) -> str:
    # mesma validação do EmailStr, sem normalizar o domínio
    validate_email(value)
    return value


# mantém a string como enviada (HttpUrl normalizaria barra final etc.)
UrlStr = Annotated[str, AfterValidator(_validate_url)]
EmailText = Annotated[str, AfterValidator(_validate_email)]

RequiredText = Annotated[str, Field(min_length=2)]
OptionalText = Optional[str]

RowId = Annotated[int, Path(ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)]
