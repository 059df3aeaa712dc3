"""
Tests for validating and executing GraphQL operations against a store
"""

import pytest

from blogql.graphql.schema import (
    execute_operation,
    execute_operation_sync,
    print_schema,
    validate_schema,
)
from blogql.store import EntityStore, Post, User


class TestSchemaContract:
    """The SDL exposed to clients."""

    def test_validate_schema(self):
        validate_schema()

    @pytest.mark.parametrize(
        "line",
        [
            "  users(query: String): [User!]!",
            "  me: User!",
            "  posts(query: String): [Post!]!",
            "  comments(query: String): [Comment!]!",
            "  createUser(name: String!, email: String!, age: Int): User!",
            "  id: ID!",
            "  age: Int",
            "  published: Boolean!",
            "  author: User!",
            "  post: Post!",
        ],
    )
    def test_sdl_contains(self, line):
        assert line in print_schema().splitlines()

    def test_private_record_not_exposed(self):
        assert "record" not in print_schema()


@pytest.mark.asyncio
class TestQueries:
    """Root queries with nested selections."""

    async def test_users_with_nested_posts(self, store):
        result = await execute_operation(
            "{ users { id name posts { id title } } }", store=store
        )

        assert result.errors is None
        assert result.data == {
            "users": [
                {
                    "id": "1",
                    "name": "Andrew",
                    "posts": [
                        {"id": "1", "title": "Post title 1"},
                        {"id": "2", "title": "Post title 2"},
                    ],
                },
                {"id": "2", "name": "Sarah", "posts": [{"id": "3", "title": "Post title 3 "}]},
                {"id": "3", "name": "Mike", "posts": []},
            ]
        }

    async def test_users_filter_variable(self, store):
        result = await execute_operation(
            "query Find($q: String) { users(query: $q) { name } }",
            variables={"q": "ANDR"},
            store=store,
        )

        assert result.data == {"users": [{"name": "Andrew"}]}

    async def test_posts_or_semantics(self, store):
        result = await execute_operation('{ posts(query: "lel") { id body } }', store=store)

        assert result.data == {"posts": [{"id": "1", "body": "Body of the post 1 lel"}]}

    async def test_filter_not_applied_to_nested_fields(self, store):
        result = await execute_operation(
            '{ users(query: "andrew") { comments { text } } }', store=store
        )

        assert result.data == {"users": [{"comments": [{"text": "Commento 1"}]}]}

    async def test_comments_deep_nesting(self, store):
        result = await execute_operation(
            """
            {
              comments(query: "commento 3") {
                id
                author { name }
                post { id author { name } comments { id } }
              }
            }
            """,
            store=store,
        )

        assert result.errors is None
        assert result.data == {
            "comments": [
                {
                    "id": "3",
                    "author": {"name": "Sarah"},
                    "post": {
                        "id": "1",
                        "author": {"name": "Andrew"},
                        "comments": [{"id": "3"}],
                    },
                }
            ]
        }

    async def test_post_two_comments_order(self, store):
        result = await execute_operation(
            '{ posts(query: "title 2") { comments { id author { id } } } }', store=store
        )

        assert result.data == {
            "posts": [
                {
                    "comments": [
                        {"id": "1", "author": {"id": "1"}},
                        {"id": "2", "author": {"id": "2"}},
                        {"id": "4", "author": {"id": "3"}},
                    ]
                }
            ]
        }

    async def test_me(self, store):
        result = await execute_operation("{ me { id name email age posts { id } } }", store=store)

        assert result.data == {
            "me": {
                "id": "1234543",
                "name": "Mike",
                "email": "mike@exalmple.com",
                "age": None,
                "posts": [],
            }
        }

    async def test_empty_query_argument_returns_all(self, store):
        result = await execute_operation('{ comments(query: "") { id } }', store=store)

        assert len(result.data["comments"]) == 4

    async def test_defaults_to_fresh_demo_store(self):
        result = await execute_operation("{ users { id } }")

        assert result.data == {"users": [{"id": "1"}, {"id": "2"}, {"id": "3"}]}


@pytest.mark.asyncio
class TestValidation:
    """Operations rejected before any resolver runs."""

    async def test_unknown_field(self, store):
        result = await execute_operation("{ users { password } }", store=store)

        assert result.data is None
        assert "Cannot query field 'password' on type 'User'." in result.errors[0].message

    async def test_missing_required_argument(self, store):
        result = await execute_operation(
            'mutation { createUser(name: "Ann") { id } }', store=store
        )

        assert result.data is None
        assert "email" in result.errors[0].message
        assert len(store.users) == 3

    async def test_wrong_argument_type(self, store):
        result = await execute_operation(
            'mutation { createUser(name: "Ann", email: "a@b.c", age: "old") { id } }',
            store=store,
        )

        assert result.errors
        assert len(store.users) == 3


@pytest.mark.asyncio
class TestCreateUserMutation:
    """The createUser mutation over GraphQL."""

    async def test_create_user_then_list(self, store):
        created = await execute_operation(
            """
            mutation {
              createUser(name: "Ann", email: "ann@example.com", age: 30) {
                id name email age posts { id } comments { id }
              }
            }
            """,
            store=store,
        )

        assert created.errors is None
        user = created.data["createUser"]
        assert user["name"] == "Ann"
        assert user["email"] == "ann@example.com"
        assert user["age"] == 30
        assert user["posts"] == []
        assert user["comments"] == []

        listed = await execute_operation("{ users { id } }", store=store)
        assert listed.data["users"][-1] == {"id": user["id"]}

    async def test_age_omitted_is_null(self, store):
        result = await execute_operation(
            'mutation { createUser(name: "Bea", email: "bea@example.com") { age } }',
            store=store,
        )

        assert result.data == {"createUser": {"age": None}}

    async def test_duplicate_email(self, store):
        result = await execute_operation(
            'mutation { createUser(name: "Dup", email: "andrew@example.com") { id } }',
            store=store,
        )

        assert result.data is None
        assert len(result.errors) == 1
        assert result.errors[0].message == "Email taken."
        assert result.errors[0].extensions == {"code": "DUPLICATE_EMAIL"}
        assert result.errors[0].path == ["createUser"]
        assert len(store.users) == 3

    async def test_mutations_run_in_order(self, store):
        result = await execute_operation(
            """
            mutation {
              first: createUser(name: "A", email: "same@example.com") { name }
              second: createUser(name: "B", email: "same@example.com") { name }
            }
            """,
            store=store,
        )

        assert result.data is None
        assert [e.message for e in result.errors] == ["Email taken."]
        assert [u.name for u in store.users][-1] == "A"
        assert len(store.users) == 4


@pytest.mark.asyncio
class TestDanglingReferences:
    """A missing foreign-key target resolves to null, then GraphQL null propagation applies."""

    async def test_missing_post_author(self):
        store = EntityStore(
            users=[User(id="1", name="A", email="a@example.com")],
            posts=[Post(id="p", title="t", body="b", published=True, author="ghost")],
        )

        result = await execute_operation("{ posts { id author { name } } }", store=store)

        assert result.data is None
        assert result.errors[0].path == ["posts", 0, "author"]


class TestSyncExecution:
    """execute_operation_sync mirrors the async entry point."""

    def test_sync_query(self, store):
        result = execute_operation_sync('{ users(query: "mi") { name } }', store=store)

        assert result.data == {"users": [{"name": "Mike"}]}

    def test_sync_mutation_error(self, store):
        result = execute_operation_sync(
            'mutation { createUser(name: "x", email: "mike@example.com") { id } }',
            store=store,
        )

        assert result.errors[0].message == "Email taken."

    def test_operation_name_selects_operation(self, store):
        result = execute_operation_sync(
            "query A { me { id } } query B { posts { id } }",
            operation_name="B",
            store=store,
        )

        assert result.data == {"posts": [{"id": "1"}, {"id": "2"}, {"id": "3"}]}
