"""Auth Service - Autenticação simulada (sem verificação de senha)."""

import logging

from .exceptions import AuthenticationError, PermissionDeniedError, ValidationError
from .models.enums import UserRole
from .models.schemas import User

logger = logging.getLogger(__name__)


class AuthService:
    """Registro e login em memória.

    O login apenas localiza o usuário pelo e-mail; a senha é aceita sem
    verificação. Sessões ativas são mantidas como um conjunto de IDs.
    """

    def __init__(self):
        self._users: dict[str, User] = {}
        self._active: set[str] = set()

    def register(self, email: str, password: str, name: str, role: UserRole = UserRole.STUDENT) -> User:
        """Cria usuário e já o considera logado.

        Raises:
            ValidationError: campos vazios ou e-mail já cadastrado
        """
        email = email.strip().lower()
        if not email or not name.strip() or not password:
            raise ValidationError("Email, password and name are required")
        if self.find_by_email(email) is not None:
            raise ValidationError("Email already registered", details={"email": email})

        user = User(email=email, name=name.strip(), role=role)
        self._users[user.id] = user
        self._active.add(user.id)
        logger.info(f"Usuário registrado: {user.id} ({role.value})")
        return user

    def login(self, email: str, password: str) -> User:
        """Localiza o usuário pelo e-mail.

        Raises:
            AuthenticationError: e-mail desconhecido
        """
        user = self.find_by_email(email.strip().lower())
        if user is None:
            raise AuthenticationError("Invalid email or password")
        self._active.add(user.id)
        logger.debug(f"Login: {user.id}")
        return user

    def logout(self, user_id: str) -> None:
        self._active.discard(user_id)

    def find_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def is_authenticated(self, user_id: str) -> bool:
        return user_id in self._active

    def require_user(self, user_id: str | None, role: UserRole | None = None) -> User:
        """Resolve o usuário autenticado e, opcionalmente, exige um papel.

        Raises:
            AuthenticationError: usuário ausente ou deslogado
            PermissionDeniedError: papel diferente do exigido
        """
        user = self.get_user(user_id) if user_id else None
        if user is None or not self.is_authenticated(user.id):
            raise AuthenticationError("Not authenticated")
        if role is not None and user.role != role:
            raise PermissionDeniedError(
                f"Requires role '{role.value}'", details={"user_id": user.id}
            )
        return user
