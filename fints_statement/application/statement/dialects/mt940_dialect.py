"""Generic MT940 statement dialect (German banking variant)."""

import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from fints_statement.core.exceptions import MT940ParseError
from fints_statement.domain.statement.models import Balance, Booking, CounterParty, CreditDebit
from fints_statement.domain.statement.services import ParsedFragment

from .base_dialect import BaseStatementDialect

_FIELD_START = re.compile(r"^:(\d{2}[A-Z]?):(.*)$")

_BALANCE = re.compile(r"^(?P<mark>[CD])(?P<date>\d{6})(?P<currency>[A-Z]{3})(?P<amount>\d+,\d*)$")

_STATEMENT_LINE = re.compile(
    r"^(?P<value_date>\d{6})"
    r"(?P<entry_date>\d{4})?"
    r"(?P<mark>R?[CD])"
    r"(?P<funds_code>[A-Z])?"
    r"(?P<amount>\d+,\d*)"
    r"(?P<type>[NFS][A-Z0-9]{3})"
    r"(?P<customer_ref>.*?)"
    r"(?://(?P<bank_ref>[^\n]*))?"
    r"(?:\n(?P<supplementary>[\s\S]*))?$"
)

_STRUCTURED_DETAILS = re.compile(r"^(?P<gvc>\d{3})(?P<subfields>\?.*)$", re.DOTALL)
_SUBFIELD = re.compile(r"\?(\d{2})([^?]*)")

_SEPA_KEYWORD = re.compile(r"(EREF|KREF|MREF|CRED|DEBT|COAM|OAMT|SVWZ|ABWA|ABWE)\+")

PURPOSE_SUBFIELDS = [f"{n:02d}" for n in list(range(20, 30)) + list(range(60, 64))]
NO_REFERENCE = "NONREF"

BALANCE_TAGS = {"60F", "60M"}
CLOSING_TAGS = {"62F", "62M"}


@dataclass
class _Record:
    """One ':20:'-started block of fields."""
    fields: List[Tuple[str, str]] = field(default_factory=list)


@dataclass
class _Details:
    transaction_code: str = ""
    booking_text: str = ""
    purpose_lines: List[str] = field(default_factory=list)
    counter_party: CounterParty = field(default_factory=CounterParty)


class MT940Dialect(BaseStatementDialect):
    """
    Parser for MT940 as used by German banks.

    Subclasses adjust the class attributes below for institution quirks.
    """

    # Tokens some institutions send instead of a line break
    LINE_BREAK_TOKENS: Tuple[str, ...] = ()
    # Joiner for the ?20-?29/?60-?63 purpose subfields
    PURPOSE_LINE_JOINER = ""
    # Field :86: must be GVC + ?-subfields
    REQUIRE_STRUCTURED_DETAILS = True

    @property
    def dialect_name(self) -> str:
        return "MT940"

    def parse(self, text: str) -> ParsedFragment:
        fragment = ParsedFragment()
        for record in self._split_records(self._normalize(text)):
            opening, bookings, closing = self._parse_record(record)
            if fragment.opening_balance is None:
                fragment.opening_balance = opening
            if closing is not None:
                fragment.closing_balance = closing
            fragment.bookings.extend(bookings)
        return fragment

    # ========== Tokenizing ==========

    def _normalize(self, text: str) -> str:
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        for token in self.LINE_BREAK_TOKENS:
            text = text.replace(token, "\n")
        return text

    def _split_records(self, text: str) -> List[_Record]:
        records: List[_Record] = []
        current: Optional[_Record] = None

        for line in text.split("\n"):
            if not line.strip():
                continue
            if line.strip() == "-":
                current = None
                continue

            match = _FIELD_START.match(line)
            if match:
                tag, value = match.group(1), match.group(2)
                if tag == "20" or current is None:
                    current = _Record()
                    records.append(current)
                current.fields.append((tag, value))
            elif current is not None and current.fields:
                tag, value = current.fields[-1]
                current.fields[-1] = (tag, value + "\n" + line)
            else:
                raise MT940ParseError(f"Text outside of any field: '{line[:40]}'")

        return records

    # ========== Record parsing ==========

    def _parse_record(self, record: _Record) -> Tuple[Optional[Balance], List[Booking], Optional[Balance]]:
        opening: Optional[Balance] = None
        closing: Optional[Balance] = None
        lines: List[Dict] = []

        for tag, value in record.fields:
            if tag in BALANCE_TAGS:
                opening = self._parse_balance(value, tag)
            elif tag in CLOSING_TAGS:
                closing = self._parse_balance(value, tag)
            elif tag == "61":
                lines.append({"line": self._parse_statement_line(value), "details": None})
            elif tag == "86" and lines and lines[-1]["details"] is None:
                lines[-1]["details"] = self._parse_details(value)

        currency = opening.currency if opening else self.default_currency
        running: Optional[Decimal] = None
        if opening is not None and self.compute_running_balance:
            running = opening.amount

        bookings = []
        for entry in lines:
            booking = self._build_booking(entry["line"], entry["details"] or _Details(), currency)
            if running is not None:
                running += booking.amount
                booking = booking.model_copy(update={"balance_after": running})
            bookings.append(booking)

        return opening, bookings, closing

    def _parse_balance(self, value: str, tag: str) -> Balance:
        match = _BALANCE.match(value.strip())
        if not match:
            raise MT940ParseError(f"Invalid balance '{value}'", tag=tag)
        amount = self.parse_amount(match.group("amount"), tag)
        if match.group("mark") == "D":
            amount = -amount
        return Balance(
            amount=amount,
            currency=match.group("currency"),
            date=self.parse_short_date(match.group("date"), tag)
        )

    def _parse_statement_line(self, value: str) -> Dict:
        match = _STATEMENT_LINE.match(value)
        if not match:
            raise MT940ParseError(f"Invalid statement line '{value[:60]}'", tag="61")

        value_date = self.parse_short_date(match.group("value_date"), "61")
        return {
            "value_date": value_date,
            "booking_date": self.parse_entry_date(match.group("entry_date"), value_date, "61"),
            "mark": CreditDebit(match.group("mark")),
            "amount": self.parse_amount(match.group("amount"), "61"),
            "type": match.group("type"),
            "customer_ref": (match.group("customer_ref") or "").strip(),
            "bank_ref": (match.group("bank_ref") or "").strip(),
        }

    def _parse_details(self, value: str) -> _Details:
        # Continuation lines of :86: are plain wraps
        flat = value.replace("\n", "")
        match = _STRUCTURED_DETAILS.match(flat)
        if not match:
            return self._parse_unstructured_details(flat)

        subfields: Dict[str, List[str]] = {}
        for key, content in _SUBFIELD.findall(match.group("subfields")):
            subfields.setdefault(key, []).append(content)

        def first(key: str) -> str:
            return subfields.get(key, [""])[0].strip()

        purpose_lines = []
        for key in PURPOSE_SUBFIELDS:
            purpose_lines.extend(subfields.get(key, []))

        return _Details(
            transaction_code=match.group("gvc"),
            booking_text=first("00"),
            purpose_lines=purpose_lines,
            counter_party=CounterParty(
                bank=first("30"),
                account=first("31"),
                name=(first("32") + first("33")).strip()
            )
        )

    def _parse_unstructured_details(self, flat: str) -> _Details:
        if self.REQUIRE_STRUCTURED_DETAILS:
            raise MT940ParseError(f"Unstructured transaction details '{flat[:40]}'", tag="86")
        return _Details(purpose_lines=[flat])

    # ========== Booking assembly ==========

    def _build_booking(self, line: Dict, details: _Details, currency: str) -> Booking:
        parts = details.purpose_lines
        if self.PURPOSE_LINE_JOINER:
            parts = [part.strip() for part in parts if part.strip()]
        purpose = self.PURPOSE_LINE_JOINER.join(parts).strip()
        purpose, keywords = self.split_sepa_keywords(purpose)

        reference = keywords.get("EREF", "")
        if not reference and line["customer_ref"] != NO_REFERENCE:
            reference = line["customer_ref"]

        mark: CreditDebit = line["mark"]
        return Booking(
            amount=line["amount"] * mark.sign,
            currency=currency,
            value_date=line["value_date"],
            booking_date=line["booking_date"],
            mark=mark,
            transaction_type=line["type"],
            transaction_code=details.transaction_code,
            booking_text=details.booking_text,
            counter_party=details.counter_party,
            reference=reference,
            customer_reference=line["customer_ref"],
            bank_reference=line["bank_ref"],
            purpose=purpose
        )

    @staticmethod
    def split_sepa_keywords(purpose: str) -> Tuple[str, Dict[str, str]]:
        """
        Split SEPA keywords (EREF+, SVWZ+, ...) out of a purpose text.

        Returns:
            (purpose, keywords) where purpose is the SVWZ+ text when present,
            otherwise the text outside of any keyword
        """
        parts = _SEPA_KEYWORD.split(purpose)
        if len(parts) == 1:
            return purpose, {}

        keywords: Dict[str, str] = {}
        for i in range(1, len(parts) - 1, 2):
            keywords[parts[i]] = parts[i + 1].strip()

        if "SVWZ" in keywords:
            return keywords["SVWZ"], keywords
        return parts[0].strip(), keywords
