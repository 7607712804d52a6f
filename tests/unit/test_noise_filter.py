import pytest

from ue_docgen.parser import noise_filter


@pytest.mark.parametrize(
    "text",
    [
        "DECLARE_DYNAMIC_MULTICAST_DELEGATE(FOnHit);",
        "public:\n    DEFINE_LOG_CATEGORY(LogTemp);",
        "IMPLEMENT_MODULE(FDefaultModuleImpl, Core);",
        "BEGIN_SHADER_PARAMETER_STRUCT(FParams, )",
        "GENERATED_BODY()",
        "UPROPERTY(EditAnywhere)\n    float Speed;",
        "UENUM(BlueprintType)",
    ],
)
def test_macro_markers_are_detected(text: str) -> None:
    assert noise_filter.contains_macro_marker(text)


def test_plain_declaration_has_no_marker() -> None:
    assert not noise_filter.contains_macro_marker("void Tick(float DeltaTime);")


def test_macro_style_name() -> None:
    assert noise_filter.is_macro_style_name("CHECK_SLOW_IMPL")
    assert not noise_filter.is_macro_style_name("CHECK_SLOW")
    assert not noise_filter.is_macro_style_name("Get_Some_Value")


def test_is_macro_invocation_combines_both_tests() -> None:
    assert noise_filter.is_macro_invocation("void A_B_C();", "A_B_C")
    assert noise_filter.is_macro_invocation("DECLARE_X int Foo();", "Foo")
    assert not noise_filter.is_macro_invocation("int Foo();", "Foo")


def test_clean_return_type_removes_comments_and_directives() -> None:
    raw = "#if WITH_EDITOR\n  /* block */ const  FString& // trailing"

    assert noise_filter.clean_return_type(raw) == "const FString&"


def test_clean_return_type_handles_multiline_block_comment() -> None:
    assert noise_filter.clean_return_type("/* a\n b */ int32") == "int32"


@pytest.mark.parametrize(
    "return_type, rejected",
    [
        ("", True),
        ("CORE_API", True),
        ("ENGINE_API", True),
        ("X" * 201, True),
        ("X" * 200, False),
        ("Optional value", True),
        ("this should be", True),
        ("const FString&", False),
        ("UNREALED_API", False),
    ],
)
def test_is_noise_return_type(return_type: str, rejected: bool) -> None:
    assert noise_filter.is_noise_return_type(return_type) is rejected
