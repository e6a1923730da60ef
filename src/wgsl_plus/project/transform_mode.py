import enum


class TransformMode(enum.Enum):
    NONE = enum.auto()
    PRETTIFY = enum.auto()
    MINIFY = enum.auto()
    OBFUSCATE = enum.auto()

    @classmethod
    def from_name(cls, name: str):
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(
                f'Unknown mode "{name}", expected one of: none, prettify, minify, obfuscate'
            ) from None
