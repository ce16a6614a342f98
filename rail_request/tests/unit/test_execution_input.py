"""
Unit tests for ExecutionInput, ExecutionInputBuilder and ExecutionId.
"""

import pytest

from rail_request.core.exceptions import InvalidArgument
from rail_request.core.execution import ExecutionId, ExecutionInput, ExecutionInputBuilder

pytestmark = pytest.mark.unit


class TestExecutionId:
    def test_from_value(self):
        execution_id = ExecutionId.from_value("req-1")

        assert execution_id.value == "req-1"
        assert str(execution_id) == "req-1"
        assert execution_id == ExecutionId("req-1")

    def test_from_value_returns_same_instance(self):
        execution_id = ExecutionId("abc")

        assert ExecutionId.from_value(execution_id) is execution_id

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_value_is_rejected(self, value):
        with pytest.raises(InvalidArgument):
            ExecutionId.from_value(value)

    def test_generate_is_unique(self):
        assert ExecutionId.generate() != ExecutionId.generate()


class TestExecutionInputBuilder:
    def test_build_populates_every_field(self):
        middleware = object()
        execution_input = (
            ExecutionInput.new_builder()
            .query("{ ping }")
            .operation_name("Ping")
            .variables({"a": 1})
            .variable("b", 2)
            .locale("en")
            .execution_id("exec-1")
            .context_value("ctx")
            .root_value("root")
            .extension("persistedQuery", {"version": 1})
            .context_entry("traceId", "abc")
            .add_middleware(middleware)
            .build()
        )

        assert execution_input.query == "{ ping }"
        assert execution_input.operation_name == "Ping"
        assert execution_input.variables == {"a": 1, "b": 2}
        assert execution_input.locale == "en"
        assert execution_input.execution_id == ExecutionId("exec-1")
        assert execution_input.context_value == "ctx"
        assert execution_input.root_value == "root"
        assert execution_input.extensions == {"persistedQuery": {"version": 1}}
        assert execution_input.graphql_context == {"traceId": "abc"}
        assert execution_input.middleware == (middleware,)

    def test_build_without_query_fails(self):
        with pytest.raises(InvalidArgument):
            ExecutionInputBuilder().variables({"a": 1}).build()

    def test_built_input_does_not_share_state_with_builder(self):
        builder = ExecutionInput.new_builder().query("{ ping }").variable("a", 1)
        first = builder.build()

        builder.variable("b", 2)
        second = builder.build()

        assert first.variables == {"a": 1}
        assert second.variables == {"a": 1, "b": 2}

    def test_seeded_builder_does_not_modify_source(self):
        source = ExecutionInput("{ ping }", variables={"a": 1}, graphql_context={"k": "v"})

        builder = source.to_builder()
        builder.variable("a", 5).context_entry("k", "changed").execution_id("x")
        builder.build()

        assert source.variables == {"a": 1}
        assert source.graphql_context == {"k": "v"}
        assert source.execution_id is None

    def test_execution_id_can_be_cleared(self):
        execution_input = (
            ExecutionInput("{ ping }", execution_id=ExecutionId("a"))
            .to_builder()
            .execution_id(None)
            .build()
        )

        assert execution_input.execution_id is None


class TestExecutionInput:
    def test_defaults(self):
        execution_input = ExecutionInput("{ ping }")

        assert execution_input.operation_name is None
        assert execution_input.variables == {}
        assert execution_input.extensions == {}
        assert execution_input.graphql_context == {}
        assert execution_input.middleware == ()
        assert execution_input.execution_id is None

    def test_empty_query_is_rejected(self):
        with pytest.raises(InvalidArgument):
            ExecutionInput("")

    @pytest.mark.parametrize("query", [5, b"{ ping }"])
    def test_non_string_query_is_rejected(self, query):
        with pytest.raises(InvalidArgument):
            ExecutionInput(query)

    def test_mappings_are_read_only(self):
        execution_input = ExecutionInput("{ ping }", variables={"a": 1})

        with pytest.raises(TypeError):
            execution_input.variables["a"] = 2
        with pytest.raises(TypeError):
            execution_input.graphql_context["k"] = "v"

    def test_fields_cannot_be_reassigned(self):
        execution_input = ExecutionInput("{ ping }")

        with pytest.raises(AttributeError):
            execution_input.query = "{ other }"

    def test_transform_returns_new_input(self):
        original = ExecutionInput("{ ping }", locale="en")

        transformed = original.transform(lambda builder: builder.locale("fr"))

        assert transformed is not original
        assert transformed.locale == "fr"
        assert original.locale == "en"
        assert transformed.query == "{ ping }"

    def test_to_execute_kwargs(self):
        execution_input = ExecutionInput(
            "query Ping { ping }",
            operation_name="Ping",
            variables={"a": 1},
            context_value="ctx",
            root_value="root",
        )

        kwargs = execution_input.to_execute_kwargs()

        assert kwargs == {
            "source": "query Ping { ping }",
            "operation_name": "Ping",
            "variable_values": {"a": 1},
            "context_value": "ctx",
            "root_value": "root",
        }
        assert isinstance(kwargs["variable_values"], dict)

    def test_to_execute_kwargs_includes_middleware(self):
        middleware = object()
        execution_input = ExecutionInput("{ ping }", middleware=[middleware])

        assert execution_input.to_execute_kwargs()["middleware"] == [middleware]
