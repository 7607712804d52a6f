from pathlib import Path

import pytest

from ue_docgen.scanner import PLUGINS_CATEGORY, ModuleScanner
from tests.conftest import write_file

CATEGORIES = ["Runtime", "Editor", "Developer", "Programs"]


def test_scan_finds_modules_with_build_cs(engine_tree: Path) -> None:
    scanner = ModuleScanner(engine_tree, CATEGORIES, exclude_dirs=["ThirdParty"])
    modules = scanner.scan()

    assert [(m.name, m.category) for m in modules] == [("Core", "Runtime"), ("UnrealEd", "Editor")]

    core = modules[0]
    assert core.path == "Engine/Source/Runtime/Core"
    assert core.build_cs_path.name == "Core.Build.cs"
    assert core.public_dir is not None and core.public_dir.name == "Public"
    assert core.private_dir is not None and core.private_dir.name == "Private"
    assert modules[1].private_dir is None


def test_excluded_directory_is_not_a_module_unless_allowed(engine_tree: Path) -> None:
    modules = ModuleScanner(engine_tree, ["Runtime"], exclude_dirs=[]).scan()

    assert [m.name for m in modules] == ["Core", "ThirdParty"]


def test_build_cs_without_public_or_private_is_skipped(engine_tree: Path) -> None:
    write_file(engine_tree / "Developer" / "Empty" / "Empty.Build.cs", "")

    modules = ModuleScanner(engine_tree, ["Developer"]).scan()

    assert modules == []


def test_missing_source_dir_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        ModuleScanner(tmp_path / "Missing", CATEGORIES).scan()


def test_source_dir_that_is_a_file_raises(tmp_path: Path) -> None:
    not_a_dir = write_file(tmp_path / "Source", "")

    with pytest.raises(NotADirectoryError):
        ModuleScanner(not_a_dir, CATEGORIES).scan()


def test_scan_plugins_at_any_depth(engine_tree: Path, tmp_path: Path) -> None:
    plugins = tmp_path / "Engine" / "Plugins"
    write_file(plugins / "Online" / "OnlineSubsystem" / "Source" / "OnlineSubsystem" / "OnlineSubsystem.Build.cs", "")
    write_file(plugins / "Online" / "OnlineSubsystem" / "Source" / "OnlineSubsystem" / "Public" / "Online.h", "")
    write_file(plugins / "Misc" / "ThirdParty" / "Lib" / "Lib.Build.cs", "")
    (plugins / "Misc" / "ThirdParty" / "Lib" / "Public").mkdir(parents=True)

    scanner = ModuleScanner(engine_tree, CATEGORIES, exclude_dirs=["ThirdParty"])
    scanner.scan()
    plugin_modules = scanner.scan_plugins(plugins)

    assert [m.name for m in plugin_modules] == ["OnlineSubsystem"]
    assert plugin_modules[0].category == PLUGINS_CATEGORY
    assert plugin_modules[0].path == "Engine/Plugins/Online/OnlineSubsystem/Source/OnlineSubsystem"
    assert [m.name for m in scanner.modules] == ["Core", "UnrealEd", "OnlineSubsystem"]


def test_missing_plugins_dir_yields_nothing(engine_tree: Path, tmp_path: Path) -> None:
    assert ModuleScanner(engine_tree, CATEGORIES).scan_plugins(tmp_path / "NoPlugins") == []


def test_get_module_count(engine_tree: Path, tmp_path: Path) -> None:
    plugins = tmp_path / "Plugins"
    write_file(plugins / "Foo" / "Foo.Build.cs", "")
    (plugins / "Foo" / "Private").mkdir(parents=True)

    scanner = ModuleScanner(engine_tree, CATEGORIES, exclude_dirs=["ThirdParty"])
    scanner.scan()
    scanner.scan_plugins(plugins)

    assert scanner.get_module_count() == {
        "Runtime": 1,
        "Editor": 1,
        "Developer": 0,
        "Programs": 0,
        "Plugins": 1,
    }
