"""MT940 dialect of Postbank."""

from .mt940_dialect import MT940Dialect


class PostbankMT940Dialect(MT940Dialect):
    """
    Postbank ends each purpose subfield (?20-?29, ?60-?63) at a word
    boundary instead of wrapping at a fixed width, so the subfields are
    joined with a space. SEPA keywords (EREF+, SVWZ+, ...) regularly start
    mid-subfield and are split out like in the generic dialect.
    """

    PURPOSE_LINE_JOINER = " "

    @property
    def dialect_name(self) -> str:
        return "Postbank"
