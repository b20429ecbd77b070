"""MT940 dialect of the Sparda banks."""

from .mt940_dialect import MT940Dialect


class SpardaMT940Dialect(MT940Dialect):
    """
    Sparda banks deviate from the generic grammar in two ways:

    - Lines are separated by ``@@`` instead of CR/LF.
    - Field :86: may be plain free text without GVC and ?-subfields; it is
      then taken as the purpose text.
    """

    LINE_BREAK_TOKENS = ("@@",)
    REQUIRE_STRUCTURED_DETAILS = False

    @property
    def dialect_name(self) -> str:
        return "Sparda"
