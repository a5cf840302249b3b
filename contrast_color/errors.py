"""Exceptions raised by contrast_color."""


class ContrastColorError(Exception):
    """Base class for every error raised by this package."""


class InvalidColorInput(ContrastColorError, ValueError):
    """A color identifier could not be resolved to an RGB triple."""

    def __init__(self, identifier, reason=None):
        self.identifier = identifier
        message = f"Cannot resolve color {identifier!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EmptyCandidateSet(ContrastColorError, ValueError):
    """No candidate colors were given to choose from."""

    def __init__(self):
        super().__init__("Candidate set is empty, no contrast color can be chosen")


class UnknownPalette(ContrastColorError, ValueError):
    """A preset name that is not registered in PALETTES."""

    def __init__(self, name, known):
        self.name = name
        super().__init__(f"Unknown palette {name!r} (known: {', '.join(known)})")
