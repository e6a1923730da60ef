class WgslPlusError(Exception):
    """Base class for every error raised by wgsl-plus."""


class LexError(WgslPlusError):
    character: str
    position: int

    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(f"Unexpected character: {character}")


class MacroArityError(WgslPlusError):
    name: str
    expected: int
    actual: int

    def __init__(self, name: str, expected: int, actual: int) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(f"Macro {name} expects {expected} arguments, got {actual}")


class ConditionalSyntaxError(WgslPlusError):
    pass


class LinkError(WgslPlusError):
    pass


class CircularDependencyError(LinkError):
    pass


class OutputFormatError(WgslPlusError):
    pass


class ConfigError(WgslPlusError):
    pass
