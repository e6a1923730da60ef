import os, sys, pyjson5
from collections.abc import Callable
from typing import Any

from wgsl_plus.errors import ConfigError
from wgsl_plus.formatting import ExportType
from wgsl_plus.preprocessing import MacroDefine

from .transform_mode import TransformMode

CONFIG_FILE_NAME = "wgsl-plus.json"


class ProjectConfig:
    """
    Settings read from a `wgsl-plus.json` project file.\n
    The file holds a `base_profile` and named `profiles`. Selected profiles replace the
    base profile values they set, list values of several selected profiles are combined.
    """

    macros: list[MacroDefine]
    search_paths: list[str]
    mode: TransformMode | None
    export_type: ExportType | None

    def __init__(self) -> None:
        self.macros = []
        self.search_paths = []
        self.mode = None
        self.export_type = None

    def read_json_file(self, path: str, profiles: list[str]):
        if not os.path.isfile(path):
            return
        try:
            with open(path) as f:
                json_data = pyjson5.load(f)
        except pyjson5.Json5Exception as e:
            raise ConfigError(f'Failed to parse project file "{path}": {e}') from None
        if not isinstance(json_data, dict):
            raise ConfigError(f'Project file "{path}" must contain an object')
        project_folder = os.path.split(path)[0]

        list_properties: list[tuple[list, str, Callable[[Any], list]]] = [
            (
                self.macros,
                "macros",
                lambda p: [MacroDefine.from_string(x) for x in p],
            ),
            (
                self.search_paths,
                "search_paths",
                lambda p: [
                    os.path.normpath(os.path.join(project_folder, x)) for x in p
                ],
            ),
        ]
        value_properties: list[tuple[str, Callable[[Any], Any]]] = [
            ("mode", self._parse_mode),
            ("export_type", self._parse_export_type),
        ]
        updated_properties = {name: False for _, name, _ in list_properties}
        updated_properties.update({name: False for name, _ in value_properties})

        if "profiles" in json_data:
            json_profiles = json_data["profiles"]
            for profile in profiles:
                if profile not in json_profiles:
                    print(f'Warning: profile "{profile}" was not found!', file=sys.stderr)
                    continue
                profile = json_profiles[profile]

                for property, property_name, value_getter in list_properties:
                    if property_name in profile:
                        if not updated_properties[property_name]:
                            property[:] = []
                            updated_properties[property_name] = True

                        values = value_getter(profile[property_name])
                        property.extend(
                            (item for item in values if item not in property)
                        )

                for property_name, value_getter in value_properties:
                    if property_name in profile:
                        setattr(self, property_name, value_getter(profile[property_name]))
                        updated_properties[property_name] = True

        if "base_profile" in json_data:
            base_profile = json_data["base_profile"]

            for property, property_name, value_getter in list_properties:
                if (
                    property_name in base_profile
                    and not updated_properties[property_name]
                ):
                    property[:] = value_getter(base_profile[property_name])

            for property_name, value_getter in value_properties:
                if (
                    property_name in base_profile
                    and not updated_properties[property_name]
                ):
                    setattr(self, property_name, value_getter(base_profile[property_name]))

    @staticmethod
    def _parse_mode(value: str):
        try:
            return TransformMode.from_name(value)
        except ValueError as e:
            raise ConfigError(str(e)) from None

    @staticmethod
    def _parse_export_type(value: str):
        try:
            return ExportType(value)
        except ValueError:
            raise ConfigError(
                f"Invalid export type: {value}. Must be 'esm' or 'commonjs'"
            ) from None
