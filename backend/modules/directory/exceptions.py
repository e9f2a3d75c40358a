"""
Directory module exceptions.
"""

from shared.exceptions import NotFoundError
from modules.auth.exceptions import EmailAlreadyRegisteredError


class DuplicateEmailError(EmailAlreadyRegisteredError):
    """Raised when an operator is registered with an email already in use."""


class OperatorNotFoundError(NotFoundError):
    """
    Raised when an operator does not exist or is not supervised by the caller.

    Both cases share one error so callers cannot probe for operators
    belonging to other supervisors.
    """

    def __init__(self, operator_id: str):
        super().__init__(
            "Operador não encontrado",
            code="OPERATOR_NOT_FOUND",
            details={"operador_id": operator_id},
        )
