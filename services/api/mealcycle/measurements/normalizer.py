from .registry import UNIT_VARIATIONS, is_known_unit


def normalize_unit(unit: str) -> str:
    """
    Map a recipe-authored unit string to its canonical registry key.

    Rules, first match wins:
    - Known variation ("Cups", "grams", "LBS")
    - Already canonical or a count-style unit
    - Plural: strip a trailing 's', then a trailing 'es'
    - Otherwise the lowercased input is passed through

    Never fails; unknown units come back lowercased so the converter can
    report "no path" for them.
    """
    if not isinstance(unit, str):
        return unit

    u = unit.lower()

    if u in UNIT_VARIATIONS:
        return UNIT_VARIATIONS[u]

    if is_known_unit(u):
        return u

    if u.endswith("s") and is_known_unit(u[:-1]):
        return u[:-1]

    if u.endswith("es") and is_known_unit(u[:-2]):
        return u[:-2]

    return u
