import logging
from pathlib import Path

from ue_docgen.parser.api_parser import ApiParser, get_engine_relative_path
from tests.conftest import write_file


def test_missing_public_dir_yields_empty_set(tmp_path: Path) -> None:
    result = ApiParser(tmp_path / "Nope").parse()

    assert len(result) == 0


def test_generated_headers_and_other_extensions_are_skipped(tmp_path: Path) -> None:
    public = tmp_path / "Engine" / "Source" / "Runtime" / "Core" / "Public"
    write_file(public / "A.h", "class FA {};")
    write_file(public / "A.generated.h", "class FGenerated {};")
    write_file(public / "A.inl", "class FInline {};")
    write_file(public / "Sub" / "B.h", "class FB {};")

    parser = ApiParser(public)
    files = [p.name for p in parser.find_header_files(parser.public_dir)]

    assert files == ["A.h", "B.h"]
    assert [c.name for c in parser.parse().classes] == ["FA", "FB"]


def test_records_use_engine_relative_paths(tmp_path: Path) -> None:
    public = tmp_path / "Engine" / "Source" / "Runtime" / "Core" / "Public"
    write_file(public / "Math" / "Vector.h", "struct FVector {\n};")

    result = ApiParser(public).parse()

    assert result.structs[0].file_path == "Engine/Source/Runtime/Core/Public/Math/Vector.h"


def test_relative_path_falls_back_to_base_dir(tmp_path: Path) -> None:
    header = tmp_path / "Source" / "Foo" / "Public" / "Foo.h"

    assert get_engine_relative_path(header, tmp_path / "Source") == "Foo/Public/Foo.h"


def test_declarations_from_files_are_concatenated_in_order(tmp_path: Path) -> None:
    public = tmp_path / "Public"
    write_file(public / "A.h", "class FDup;\nvoid First();")
    write_file(public / "B.h", "class FDup;\nvoid Second();")

    result = ApiParser(public).parse()

    assert [c.name for c in result.classes] == ["FDup", "FDup"]
    assert [f.name for f in result.functions] == ["First", "Second"]
    assert result.classes[0].file_path.endswith("A.h")
    assert result.classes[1].file_path.endswith("B.h")


def test_unreadable_file_is_skipped_with_warning(tmp_path: Path, monkeypatch, caplog) -> None:
    public = tmp_path / "Public"
    write_file(public / "Bad.h", "class FBad {};")
    write_file(public / "Good.h", "class FGood {};")

    parser = ApiParser(public)
    original_read = parser._read_file

    def fake_read(file_path: Path):
        if file_path.name == "Bad.h":
            return None
        return original_read(file_path)

    monkeypatch.setattr(parser, "_read_file", fake_read)

    with caplog.at_level(logging.WARNING):
        result = parser.parse()

    assert [c.name for c in result.classes] == ["FGood"]
    assert len(parser.skipped_files) == 1
    assert parser.skipped_files[0].endswith("Bad.h")
    assert any("Bad.h" in record.getMessage() for record in caplog.records)


def test_non_utf8_file_is_still_parsed(tmp_path: Path) -> None:
    public = tmp_path / "Public"
    public.mkdir()
    (public / "Latin.h").write_bytes("// caf\xe9\nclass FLatin {};".encode("latin-1"))

    result = ApiParser(public).parse()

    assert [c.name for c in result.classes] == ["FLatin"]


def test_gbk_fallback_can_absorb_following_ascii_byte(tmp_path: Path) -> None:
    public = tmp_path / "Public"
    public.mkdir()
    raw = b"class \xe9FGbk {};"
    (public / "Gbk.h").write_bytes(raw)

    parser = ApiParser(public)
    content = parser._read_file(public / "Gbk.h")

    assert content == raw.decode("gbk")
    assert "FGbk" not in content
    assert parser.parse().classes == ()
