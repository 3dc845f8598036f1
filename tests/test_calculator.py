import pytest

from mcpplay.calculator import INT32_MAX, INT32_MIN, Calculator, ToolError


@pytest.fixture
def calc():
    return Calculator()


@pytest.mark.parametrize("a,b", [(0, 0), (7, 12), (-40, 15), (1000, -999)])
def test_sum_then_sub_round_trip(calc, a, b):
    total = int(calc.sum(a, b))
    assert calc.sub(total, b) == str(a)


@pytest.mark.parametrize("a,b", [(3, 9), (-5, 2), (0, 17)])
def test_sum_is_commutative(calc, a, b):
    assert calc.sum(a, b) == calc.sum(b, a)


def test_sub_of_equal_values_is_zero(calc):
    assert calc.sub(123, 123) == "0"


def test_sum_with_zero_is_identity(calc):
    assert calc.sum(INT32_MAX, 0) == str(INT32_MAX)
    assert calc.sum(0, INT32_MIN) == str(INT32_MIN)


def test_sum_overflow_raises(calc):
    with pytest.raises(ToolError, match="overflow"):
        calc.sum(INT32_MAX, 1)


def test_sub_overflow_raises(calc):
    with pytest.raises(ToolError, match="overflow"):
        calc.sub(INT32_MIN, 1)


@pytest.mark.parametrize("bad", [INT32_MAX + 1, INT32_MIN - 1])
def test_operand_out_of_range(calc, bad):
    with pytest.raises(ToolError, match="out of range"):
        calc.sum(bad, 0)


@pytest.mark.parametrize("bad", [1.5, "3", True, None])
def test_operand_wrong_type(calc, bad):
    with pytest.raises(ToolError, match="invalid type"):
        calc.sub(0, bad)


def test_get_info_instructions(calc):
    info = calc.get_info()
    assert info["instructions"] == "A simple calculator"
    assert "tools" in info["capabilities"]


def test_list_tools_descriptions(calc):
    tools = {tool["name"]: tool for tool in calc.list_tools()}
    assert tools["sum"]["description"] == "Calculate the sum of two numbers"
    assert tools["sub"]["description"] == "Calculate the difference of two numbers"


def test_list_tools_schemas_require_both_operands(calc):
    for tool in calc.list_tools():
        schema = tool["inputSchema"]
        assert schema["required"] == ["a", "b"]
        assert schema["properties"]["a"]["description"] == "the left hand side number"
        assert schema["properties"]["b"]["description"] == "the right hand side number"


def test_call_tool_matches_direct_call(calc):
    result = calc.call_tool("sum", {"a": 4, "b": 6})
    assert result["isError"] is False
    assert result["content"] == [{"type": "text", "text": calc.sum(4, 6)}]


def test_call_tool_sub(calc):
    result = calc.call_tool("sub", {"a": 10, "b": 4})
    assert result["content"][0]["text"] == calc.sub(10, 4)


def test_call_tool_ignores_extra_fields(calc):
    result = calc.call_tool("sum", {"a": 1, "b": 2, "c": 99})
    assert result["content"][0]["text"] == calc.sum(1, 2)


def test_call_unknown_tool(calc):
    with pytest.raises(ToolError, match="tool not found"):
        calc.call_tool("mul", {"a": 1, "b": 2})


def test_call_tool_missing_field(calc):
    with pytest.raises(ToolError, match="missing field `b`"):
        calc.call_tool("sum", {"a": 1})


def test_call_tool_without_arguments(calc):
    with pytest.raises(ToolError, match="missing field `a`"):
        calc.call_tool("sub", None)


def test_call_tool_non_object_arguments(calc):
    with pytest.raises(ToolError) as info:
        calc.call_tool("sum", [1, 2])
    assert info.value.code == -32602