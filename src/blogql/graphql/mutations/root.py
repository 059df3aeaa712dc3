"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.user import User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createUser")
    def create_user(
        self,
        info: strawberry.Info,
        name: str,
        email: str,
        age: int | None = strawberry.UNSET,
    ) -> User:
        """Create a new user. Fails with "Email taken." if the email is in use."""
        from ..resolvers.user import create_user

        return create_user(info, name, email, None if age is strawberry.UNSET else age)
