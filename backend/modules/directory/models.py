"""
Directory data models.
"""

from pydantic import BaseModel, Field

from shared.models import AccessLevel


class RegisterOperatorRequest(BaseModel):
    """Body of POST /operador/cadastrar."""

    nome: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    senha: str = Field(..., min_length=1)


class RegisterOperatorResponse(BaseModel):
    """Body returned after registering an operator."""

    message: str
    operador_id: str


class OperatorSummary(BaseModel):
    """One entry of a supervisor's roster."""

    id: str
    nome: str | None = None
    email: str
    nivel_acesso: AccessLevel = AccessLevel.OPERADOR
    online: bool = False
