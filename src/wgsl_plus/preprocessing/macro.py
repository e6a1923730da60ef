MacroTable = dict[str, "Macro"]


class Macro:
    value: str
    params: list[str] | None

    def __init__(self, value: str = "", params: list[str] | None = None) -> None:
        self.value = value
        self.params = params

    @property
    def is_function_like(self) -> bool:
        return self.params is not None

    def __eq__(self, value):
        if not isinstance(value, type(self)):
            return False
        return self.value == value.value and self.params == value.params

    def __repr__(self) -> str:
        if self.params is None:
            return f"Macro({self.value!r})"
        return f"Macro({self.value!r}, {self.params!r})"


class MacroDefine:
    """
    A predefined macro given on the command line or in a project file,
    in the same `NAME value` form a `#define` line uses.
    """

    name: str
    value: str

    def __init__(self, name: str = "", value: str = "") -> None:
        self.name = name
        self.value = value

    def __eq__(self, value):
        if not isinstance(value, type(self)):
            return False
        return self.name == value.name and self.value == value.value

    def format_define(self):
        if not self.value:
            return f"#define {self.name}"
        return f"#define {self.name} {self.value}"

    def to_macro(self):
        return Macro(self.value)

    @classmethod
    def from_string(cls, string: str):
        elements = string.strip().split(None, 1)
        if not elements:
            return cls()
        # `NAME=value` is accepted as well.
        if len(elements) == 1 and "=" in elements[0]:
            elements = elements[0].split("=", 1)
        return cls(elements[0], elements[1].strip() if len(elements) > 1 else "")
