import pytest

from ue_docgen.parser.params import parse_parameter, parse_parameters, split_parameters
from ue_docgen.parser.records import ParameterRecord


def test_split_empty_input_yields_no_parameters() -> None:
    assert split_parameters("") == []
    assert split_parameters("   \n\t") == []


def test_split_on_top_level_commas_only() -> None:
    parts = split_parameters("const TMap<FName, int32>& Map, TArray<TPair<int, float>> Pairs, bool bFlag")

    assert parts == [
        "const TMap<FName, int32>& Map",
        "TArray<TPair<int, float>> Pairs",
        "bool bFlag",
    ]


@pytest.mark.parametrize(
    "params, expected_count",
    [
        ("int A", 1),
        ("int A, float B", 2),
        ("TArray<int> A, TMap<K, V> B, bool C", 3),
        ("void", 1),
    ],
)
def test_split_count_matches_top_level_commas(params: str, expected_count: int) -> None:
    assert len(split_parameters(params)) == expected_count


def test_split_drops_empty_pieces_and_trims() -> None:
    assert split_parameters(" int A ,, float B , ") == ["int A", "float B"]


def test_split_tolerates_stray_closing_bracket() -> None:
    # 深度变为负数后，顶层逗号不再切分，但不会报错
    assert split_parameters("int A > 0, int B") == ["int A > 0, int B"]


def test_parse_parameter_with_reference_type() -> None:
    assert parse_parameter("const FString& Name") == ParameterRecord(name="Name", type="const FString&")


def test_parse_parameter_without_name() -> None:
    assert parse_parameter("int") == ParameterRecord(name="", type="int")


def test_parse_parameter_strips_default_value() -> None:
    assert parse_parameter("int X = 5") == ParameterRecord(name="X", type="int")


def test_parse_parameter_collapses_type_whitespace() -> None:
    param = parse_parameter("const   TArray<int>  &  Values")

    assert param.name == "Values"
    assert param.type == "const TArray<int> &"


def test_parse_parameter_name_on_next_line() -> None:
    assert parse_parameter("const FString&\n    Name") == ParameterRecord(name="Name", type="const FString&")


def test_parse_parameter_pointer_without_space_has_no_name() -> None:
    assert parse_parameter("UObject*") == ParameterRecord(name="", type="UObject*")


def test_parse_parameters_skips_default_only_pieces() -> None:
    params = parse_parameters("int A, = 5, float B = 1.0f")

    assert [(p.type, p.name) for p in params] == [("int", "A"), ("float", "B")]


def test_parse_parameter_non_ascii_name_is_not_a_name() -> None:
    assert parse_parameter("int Größe") == ParameterRecord(name="", type="int Größe")
