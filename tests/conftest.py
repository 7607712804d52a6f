import sys
from pathlib import Path

import pytest


def _add_root_to_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_add_root_to_path()

from ue_docgen.config import get_config  # noqa: E402


def write_file(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


CORE_BUILD_CS = """
using UnrealBuildTool;

public class Core : ModuleRules
{
    public Core(ReadOnlyTargetRules Target) : base(Target)
    {
        PublicDependencyModuleNames.AddRange(new string[] { "TraceLog", "BuildSettings" });
        PrivateDependencyModuleNames.Add("Projects");
        DynamicallyLoadedModuleNames.Add("SourceControl");
    }
}
"""

CORE_HEADER = """#pragma once

#include "CoreTypes.h"

class CORE_API FOutputDevice : public FArchive
{
public:
    static void Serialize(const TCHAR* Data, int32 Verbosity);
};

enum class ELogVerbosity { NoLogging = 0, Fatal, Error };

struct FLogCategoryBase
{
};
"""


@pytest.fixture(autouse=True)
def default_config(tmp_path_factory):
    """每个测试都使用内置默认配置"""
    missing = tmp_path_factory.mktemp("config") / "missing.yaml"
    get_config().load(missing)
    yield get_config()
    get_config().load(missing)


@pytest.fixture
def engine_tree(tmp_path: Path) -> Path:
    """最小的 Engine/Source 目录：Runtime/Core、Editor/UnrealEd、一个 ThirdParty 目录"""
    source = tmp_path / "Engine" / "Source"

    core = source / "Runtime" / "Core"
    write_file(core / "Core.Build.cs", CORE_BUILD_CS)
    write_file(core / "Public" / "Logging" / "LogVerbosity.h", CORE_HEADER)
    write_file(core / "Public" / "Logging" / "LogVerbosity.generated.h", "class UGenerated : public UObject {};")
    write_file(core / "Private" / "Core.cpp", "// private")

    editor = source / "Editor" / "UnrealEd"
    write_file(editor / "UnrealEd.Build.cs", "public class UnrealEd : ModuleRules {}")
    write_file(
        editor / "Public" / "EditorManager.h",
        "class UNREALED_API FEditorManager : public FTickableEditorObject\n{\n};\n",
    )

    # 没有 Build.cs 的目录、排除目录都不算模块
    write_file(source / "Runtime" / "NotAModule" / "Public" / "X.h", "class X {};")
    write_file(source / "Runtime" / "ThirdParty" / "ThirdParty.Build.cs", "")
    (source / "Runtime" / "ThirdParty" / "Public").mkdir(parents=True)

    return source
