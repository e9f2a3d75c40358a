"""
Monitoring module exceptions.
"""

from shared.exceptions import ValidationError


class InvalidEventError(ValidationError):
    """Raised when a status event kind is not recognized."""

    def __init__(self, tipo: object):
        super().__init__(
            "Tipo de registro inválido",
            code="INVALID_EVENT",
            details={
                "tipo": tipo,
                "allowed": ["entrada", "saida", "almoco_inicio", "almoco_fim", "ping"],
            },
        )
