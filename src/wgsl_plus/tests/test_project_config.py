import os
import pytest

from ..errors import ConfigError
from ..formatting import ExportType
from ..preprocessing import MacroDefine
from ..project import ProjectConfig, TransformMode

PROJECT = """{
    // Comments and trailing commas are allowed.
    base_profile: {
        macros: ["DEBUG 0", "SCALE=2"],
        search_paths: ["shared"],
        mode: "minify",
    },
    profiles: {
        debug: {macros: ["DEBUG 1"], mode: "prettify"},
        web: {macros: ["WEB"], export_type: "commonjs"},
    },
}
"""


@pytest.fixture
def project_file(tmp_path):
    path = tmp_path / "wgsl-plus.json"
    path.write_text(PROJECT, encoding="utf-8")
    return str(path)


def test_base_profile(project_file, tmp_path):
    config = ProjectConfig()
    config.read_json_file(project_file, [])
    assert config.macros == [MacroDefine("DEBUG", "0"), MacroDefine("SCALE", "2")]
    assert config.search_paths == [os.path.normpath(str(tmp_path / "shared"))]
    assert config.mode is TransformMode.MINIFY
    assert config.export_type is None


def test_profiles_replace_base_values(project_file):
    config = ProjectConfig()
    config.read_json_file(project_file, ["debug", "web"])
    assert config.macros == [MacroDefine("DEBUG", "1"), MacroDefine("WEB")]
    assert config.mode is TransformMode.PRETTIFY
    assert config.export_type is ExportType.commonjs
    assert len(config.search_paths) == 1


def test_missing_profile(project_file, capsys):
    config = ProjectConfig()
    config.read_json_file(project_file, ["release"])
    assert 'Warning: profile "release" was not found!' in capsys.readouterr().err
    assert config.mode is TransformMode.MINIFY


def test_missing_file(tmp_path):
    config = ProjectConfig()
    config.read_json_file(str(tmp_path / "wgsl-plus.json"), [])
    assert config.macros == [] and config.mode is None


@pytest.mark.parametrize(
    "content, message",
    [
        ('{base_profile: {mode: "shrink"}}', "Unknown mode"),
        ('{base_profile: {export_type: "amd"}}', "Invalid export type"),
        ("{base_profile: ", "Failed to parse project file"),
        ("[1, 2]", "must contain an object"),
    ],
)
def test_invalid_project_file(tmp_path, content, message):
    path = tmp_path / "wgsl-plus.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError, match=message):
        ProjectConfig().read_json_file(str(path), [])


def test_transform_mode_from_name():
    assert TransformMode.from_name("Obfuscate") is TransformMode.OBFUSCATE
    with pytest.raises(ValueError):
        TransformMode.from_name("compress")


@pytest.mark.parametrize(
    "string, expected",
    [
        ("DEBUG", MacroDefine("DEBUG")),
        ("QUALITY 2", MacroDefine("QUALITY", "2")),
        ("QUALITY=2", MacroDefine("QUALITY", "2")),
        ("  COLOR vec3<f32>(1.0, 0.0, 0.0) ", MacroDefine("COLOR", "vec3<f32>(1.0, 0.0, 0.0)")),
        ("", MacroDefine()),
    ],
)
def test_macro_define_from_string(string, expected):
    assert MacroDefine.from_string(string) == expected


def test_macro_define_format():
    assert MacroDefine("DEBUG").format_define() == "#define DEBUG"
    assert MacroDefine("QUALITY", "2").format_define() == "#define QUALITY 2"
