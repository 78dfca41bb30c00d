"""Custom exception hierarchy for ThemeSmith."""


class ThemeSmithError(Exception):
    """Base exception for all ThemeSmith errors."""


class RampError(ThemeSmithError):
    """Errors related to color ramp construction or sampling."""


class InvalidRampError(RampError):
    """Too few seed colors, a malformed domain, or an unparsable color."""


class SchemeError(ThemeSmithError):
    """Errors during color scheme assembly."""


class MissingRampError(SchemeError):
    """Scheme assembly references a ramp role that was not declared."""

    def __init__(self, role: str):
        super().__init__(f"Missing ramp for role '{role}'")
        self.role = role


class StyleTreeError(ThemeSmithError):
    """Errors while resolving the composed style tree."""


class DanglingExtendsError(StyleTreeError):
    """An inheritance or value reference names a path that does not exist."""

    def __init__(self, path: str, detail: str = ""):
        message = f"Reference '${path}' does not resolve"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.path = path


class CyclicExtendsError(StyleTreeError):
    """Inheritance or value references form a cycle."""

    def __init__(self, cycle: list[str]):
        super().__init__("Reference cycle: " + " -> ".join(f"${p}" for p in cycle))
        self.cycle = tuple(cycle)


class ExportError(ThemeSmithError):
    """Errors while writing theme files."""
