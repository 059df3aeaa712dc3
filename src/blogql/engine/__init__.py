"""Resolution engine: relationship lookups, root queries and mutations.

Executors take the store they operate on at construction time; nothing in
this package reads a process-wide store.
"""

from .mutations import CreateUserArgs, CreateUserResult, DuplicateEmail, MutationExecutor
from .queries import CURRENT_USER, ListFilter, QueryExecutor
from .relationships import RelationshipResolver

__all__ = [
    "CURRENT_USER",
    "CreateUserArgs",
    "CreateUserResult",
    "DuplicateEmail",
    "ListFilter",
    "MutationExecutor",
    "QueryExecutor",
    "RelationshipResolver",
]
