import itertools

SWIZZLE_COMPONENTS = "xyzwrgba"


def _generate_swizzles():
    return frozenset(
        "".join(combination)
        for length in range(1, 5)
        for combination in itertools.product(SWIZZLE_COMPONENTS, repeat=length)
    )


SWIZZLES = _generate_swizzles()
"Every 1 to 4 character accessor built from the vector component letters"


def is_potential_swizzle(name: str) -> bool:
    return name in SWIZZLES
