"""Tests for dialect selection and the MT940 dialects."""

from datetime import date
from decimal import Decimal
from unittest import TestCase

from fints_statement.application.statement.dialects import (
    DialectSelector,
    MT940Dialect,
    PostbankMT940Dialect,
    SpardaMT940Dialect,
)
from fints_statement.core.exceptions import MT940ParseError
from fints_statement.domain.statement.models import CreditDebit

from tests.samples import (
    BROKEN_MT940,
    FREE_TEXT_DETAILS_MT940,
    GENERIC_MT940,
    POSTBANK_MT940,
    SPARDA_FRAGMENT_1,
    YEAR_BOUNDARY_MT940,
)


class DialectSelectorTests(TestCase):
    def test_sparda_marker(self):
        for name in ("Sparda-Bank Nord", "SPARDA-BANK BERLIN", "Die sparda bank"):
            with self.subTest(name=name):
                self.assertIs(DialectSelector.get_dialect_class(name), SpardaMT940Dialect)

    def test_postbank_marker(self):
        for name in ("Postbank", "Deutsche POSTBANK AG", "postbank ndl der deutsche bank"):
            with self.subTest(name=name):
                self.assertIs(DialectSelector.get_dialect_class(name), PostbankMT940Dialect)

    def test_unknown_institution_gets_default(self):
        for name in ("Commerzbank", "Volksbank Mittelhessen", "", None):
            with self.subTest(name=name):
                self.assertIs(DialectSelector.get_dialect_class(name), MT940Dialect)

    def test_selection_is_stable(self):
        first = DialectSelector.get_dialect("Sparda-Bank West")
        second = DialectSelector.get_dialect("Sparda-Bank West")
        self.assertIs(type(first), type(second))
        self.assertEqual(first.dialect_name, "Sparda")

    def test_first_marker_wins(self):
        self.assertIs(DialectSelector.get_dialect_class("Sparda Postbank Kooperation"), SpardaMT940Dialect)

    def test_supported_dialects(self):
        self.assertEqual(DialectSelector.get_supported_dialects(), ["sparda", "postbank"])


class MT940DialectTests(TestCase):
    def setUp(self):
        self.dialect = MT940Dialect()

    def test_parses_bookings_in_order(self):
        parsed = self.dialect.parse(GENERIC_MT940)

        self.assertEqual(len(parsed.bookings), 3)
        self.assertEqual([b.amount for b in parsed.bookings],
                         [Decimal("-42.50"), Decimal("100.00"), Decimal("-7.50")])
        self.assertEqual([b.value_date for b in parsed.bookings],
                         [date(2023, 1, 2), date(2023, 1, 3), date(2023, 1, 5)])

    def test_booking_fields(self):
        booking = self.dialect.parse(GENERIC_MT940).bookings[0]

        self.assertEqual(booking.currency, "EUR")
        self.assertEqual(booking.mark, CreditDebit.DEBIT)
        self.assertEqual(booking.booking_date, date(2023, 1, 2))
        self.assertEqual(booking.transaction_type, "NTRF")
        self.assertEqual(booking.transaction_code, "177")
        self.assertEqual(booking.booking_text, "SEPA-UEBERWEISUNG")
        self.assertEqual(booking.purpose, "Rechnung 4711")
        self.assertEqual(booking.reference, "E2E-0001")
        self.assertEqual(booking.customer_reference, "NONREF")
        self.assertEqual(booking.bank_reference, "0102A1")
        self.assertEqual(booking.counter_party.account, "DE44500105175407324931")
        self.assertEqual(booking.counter_party.bank, "INGDDEFFXXX")
        self.assertEqual(booking.counter_party.name, "Max Mustermann")

    def test_customer_reference_used_without_end_to_end_reference(self):
        booking = self.dialect.parse(GENERIC_MT940).bookings[1]
        self.assertEqual(booking.reference, "KREF-77")
        self.assertEqual(booking.purpose, "Gehalt Januar")

    def test_nonref_is_not_a_reference(self):
        booking = self.dialect.parse(GENERIC_MT940).bookings[2]
        self.assertEqual(booking.reference, "")
        self.assertEqual(booking.purpose, "Kontofuehrung")

    def test_running_balance(self):
        parsed = self.dialect.parse(GENERIC_MT940)

        self.assertEqual([b.balance_after for b in parsed.bookings],
                         [Decimal("957.50"), Decimal("1057.50"), Decimal("1050.00")])
        self.assertEqual(parsed.opening_balance.amount, Decimal("1000.00"))
        self.assertEqual(parsed.closing_balance.amount, Decimal("1050.00"))
        self.assertEqual(parsed.closing_balance.date, date(2023, 1, 5))

    def test_running_balance_can_be_disabled(self):
        parsed = MT940Dialect(compute_running_balance=False).parse(GENERIC_MT940)
        self.assertTrue(all(b.balance_after is None for b in parsed.bookings))

    def test_entry_date_across_year_boundary(self):
        booking = self.dialect.parse(YEAR_BOUNDARY_MT940).bookings[0]
        self.assertEqual(booking.value_date, date(2023, 1, 2))
        self.assertEqual(booking.booking_date, date(2022, 12, 31))

    def test_free_text_details_are_rejected(self):
        with self.assertRaises(MT940ParseError):
            self.dialect.parse(FREE_TEXT_DETAILS_MT940)

    def test_invalid_statement_line(self):
        with self.assertRaises(MT940ParseError) as ctx:
            self.dialect.parse(BROKEN_MT940)
        self.assertEqual(ctx.exception.tag, "61")

    def test_text_outside_fields(self):
        with self.assertRaises(MT940ParseError):
            self.dialect.parse("garbage\n:20:STARTUMSE\n-")

    def test_empty_text(self):
        parsed = self.dialect.parse("")
        self.assertEqual(parsed.bookings, [])
        self.assertIsNone(parsed.opening_balance)

    def test_default_currency_without_opening_balance(self):
        text = ":20:X\n:61:2301020102C1,00NTRFNONREF\n:86:166?00GUTSCHRIFT\n-"
        booking = MT940Dialect(default_currency="CHF").parse(text).bookings[0]
        self.assertEqual(booking.currency, "CHF")
        self.assertIsNone(booking.balance_after)

    def test_reversal_marks(self):
        text = ":20:X\n:60F:C230101EUR0,00\n:61:2301020102RD5,00NTRFNONREF\n:61:2301020102RC2,00NTRFNONREF\n-"
        bookings = self.dialect.parse(text).bookings
        self.assertEqual(bookings[0].mark, CreditDebit.REVERSAL_DEBIT)
        self.assertEqual(bookings[0].amount, Decimal("-5.00"))
        self.assertEqual(bookings[1].mark, CreditDebit.REVERSAL_CREDIT)
        self.assertEqual(bookings[1].amount, Decimal("2.00"))


class SpardaDialectTests(TestCase):
    def test_at_sign_line_breaks_and_free_text(self):
        parsed = SpardaMT940Dialect().parse(SPARDA_FRAGMENT_1)

        self.assertEqual(len(parsed.bookings), 3)
        self.assertEqual([b.purpose for b in parsed.bookings],
                         ["Lastschrift Stadtwerke", "Miete Januar", "Erstattung"])
        self.assertEqual(parsed.bookings[-1].balance_after, Decimal("500.00"))

    def test_accepts_free_text_with_regular_line_breaks(self):
        parsed = SpardaMT940Dialect().parse(FREE_TEXT_DETAILS_MT940)
        self.assertEqual(parsed.bookings[0].purpose, "Lastschrift Stadtwerke")


class PostbankDialectTests(TestCase):
    def test_purpose_subfields_joined_with_space(self):
        booking = PostbankMT940Dialect().parse(POSTBANK_MT940).bookings[0]

        self.assertEqual(booking.purpose, "Rechnung Nr. 99")
        self.assertEqual(booking.reference, "PB-123")
        self.assertEqual(booking.counter_party.name, "Erika Musterfrau")

    def test_missing_entry_date_uses_value_date(self):
        booking = PostbankMT940Dialect().parse(POSTBANK_MT940).bookings[0]
        self.assertEqual(booking.booking_date, date(2023, 1, 15))
        self.assertEqual(booking.value_date, date(2023, 1, 15))

    def test_generic_dialect_reads_postbank_text_differently(self):
        booking = MT940Dialect().parse(POSTBANK_MT940).bookings[0]
        self.assertEqual(booking.purpose, "RechnungNr. 99")


class SepaKeywordTests(TestCase):
    def test_split(self):
        purpose, keywords = MT940Dialect.split_sepa_keywords("EREF+ABC KREF+K1 SVWZ+Miete")
        self.assertEqual(purpose, "Miete")
        self.assertEqual(keywords, {"EREF": "ABC", "KREF": "K1", "SVWZ": "Miete"})

    def test_without_keywords(self):
        self.assertEqual(MT940Dialect.split_sepa_keywords("Miete Januar"), ("Miete Januar", {}))

    def test_without_svwz_keeps_leading_text(self):
        purpose, keywords = MT940Dialect.split_sepa_keywords("Dauerauftrag EREF+X1")
        self.assertEqual(purpose, "Dauerauftrag")
        self.assertEqual(keywords, {"EREF": "X1"})
