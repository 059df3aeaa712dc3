"""
Write operations on the entity store.

``create_user`` is the only mutation. It reports a duplicate email as a
value on the returned result instead of raising.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import dataclass

from ..logging import get_logger
from ..store import EntityStore, User

logger = get_logger(__name__)

EMAIL_TAKEN_MESSAGE = "Email taken."


def generate_user_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class CreateUserArgs:
    """Arguments of the ``createUser`` mutation."""

    name: str
    email: str
    age: int | None = None


@dataclass(frozen=True)
class DuplicateEmail:
    """Another user already holds the requested email."""

    email: str

    @property
    def message(self) -> str:
        return EMAIL_TAKEN_MESSAGE


@dataclass(frozen=True)
class CreateUserResult:
    """Outcome of ``create_user``: exactly one of ``user`` or ``error`` is set."""

    user: User | None = None
    error: DuplicateEmail | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class MutationExecutor:
    """Apply mutations to a store under its uniqueness invariants."""

    def __init__(
        self, store: EntityStore, id_factory: Callable[[], str] = generate_user_id
    ) -> None:
        self.store = store
        self.id_factory = id_factory

    def create_user(self, args: CreateUserArgs) -> CreateUserResult:
        """
        Create a user with a freshly generated id.

        The email check and the insert run under the store lock, so two
        concurrent calls with the same email cannot both succeed. On failure
        the store is left untouched.

        Args:
            args: Name, email and optional age of the new user

        Returns:
            CreateUserResult holding the new user, or a DuplicateEmail error
        """
        with self.store.lock:
            if self.store.email_taken(args.email):
                logger.info("Rejected user creation: email taken", email=args.email)
                return CreateUserResult(error=DuplicateEmail(email=args.email))

            user = User(
                id=self.id_factory(),
                name=args.name,
                email=args.email,
                age=args.age,
            )
            self.store.add_user(user)

        logger.info("User created", user_id=user.id)
        return CreateUserResult(user=user)
