"""Statement texts and builders shared by the tests."""

from fints_statement.domain.statement.models import (
    AccountRef,
    ActionResponse,
    ResponseFragment,
    StatusCode,
    StatusSignal,
)

ACCOUNT = AccountRef(
    account_number="1234567890",
    bank_code="12030000",
    sub_account="00",
    iban="DE02120300000000202051",
    bic="BYLADEM1001",
)

ACCOUNT_WITHOUT_IBAN = AccountRef(account_number="1234567890", bank_code="12030000")

# Opening 1000,00; -42,50 +100,00 -7,50; closing 1050,00
GENERIC_MT940 = "\r\n".join([
    ":20:STARTUMSE",
    ":25:12030000/1234567890",
    ":28C:00001/001",
    ":60F:C230101EUR1000,00",
    ":61:2301020102D42,50NTRFNONREF//0102A1",
    ":86:177?00SEPA-UEBERWEISUNG?109310?20EREF+E2E-0001?21SVWZ+Rechnung 4711",
    "?30INGDDEFFXXX?31DE44500105175407324931?32Max Mustermann",
    ":61:2301030103C100,00NTRFKREF-77//0103B2",
    ":86:166?00GUTSCHRIFT?109310?20SVWZ+Gehalt Januar?30COBADEFFXXX",
    "?31DE89370400440532013000?32Firma GmbH",
    ":61:2301050105D7,50NCHGNONREF",
    ":86:805?00ABSCHLUSS?20Kontofuehrung",
    ":62F:C230105EUR1050,00",
    "-",
])

# Free-text :86: is only accepted by the Sparda dialect
FREE_TEXT_DETAILS_MT940 = "\n".join([
    ":20:STARTUMSE",
    ":60F:C230101EUR100,00",
    ":61:2301020102D10,00NMSCNONREF",
    ":86:Lastschrift Stadtwerke",
    ":62F:C230102EUR90,00",
    "-",
])

SPARDA_FRAGMENT_1 = "@@".join([
    ":20:STARTUMSE",
    ":25:20690500/9876543",
    ":28C:1",
    ":60F:C230101EUR500,00",
    ":61:2301020102D10,00NMSCNONREF",
    ":86:Lastschrift Stadtwerke",
    ":61:2301020102D20,00NMSCNONREF",
    ":86:Miete Januar",
    ":61:2301030103C30,00NMSCNONREF",
    ":86:Erstattung",
    ":62F:C230103EUR500,00",
    "-",
])

SPARDA_FRAGMENT_2 = "@@".join([
    ":20:STARTUMSE",
    ":25:20690500/9876543",
    ":28C:2",
    ":60F:C230103EUR500,00",
    ":61:2301100110D1,00NMSCNONREF",
    ":86:Gebuehr",
    ":61:2301110111D2,00NMSCNONREF",
    ":86:Porto",
    ":61:2301120112C3,00NMSCNONREF",
    ":86:Zinsen",
    ":62F:C230112EUR500,00",
    "-",
])

# No entry date in :61:, purpose subfields end at word boundaries
POSTBANK_MT940 = "\n".join([
    ":20:STARTUMSE",
    ":25:10010010/6820101",
    ":60F:C230114EUR0,00",
    ":61:230115C250,00NTRFNONREF",
    ":86:166?00SEPA-GUTSCHRIFT?20EREF+PB-123?21SVWZ+Rechnung?22Nr. 99?30PBNKDEFFXXX",
    "?31DE02100100100006820101?32Erika Musterfrau",
    ":62F:C230115EUR250,00",
    "-",
])

YEAR_BOUNDARY_MT940 = "\n".join([
    ":20:STARTUMSE",
    ":60F:C221230EUR10,00",
    ":61:2301021231D5,00NTRFNONREF",
    ":86:177?00UEBERWEISUNG?20Silvester",
    ":62F:C230102EUR5,00",
    "-",
])

BROKEN_MT940 = "\n".join([
    ":20:STARTUMSE",
    ":60F:C230101EUR1000,00",
    ":61:23XX02D42,50NTRFNONREF",
    ":62F:C230105EUR1050,00",
    "-",
])


def fragment(text: str, number: int = 3, reference: int = 3) -> ResponseFragment:
    return ResponseFragment(segment_number=number, reference_segment=reference, booked=text)


def response(*texts: str, no_data: bool = False) -> ActionResponse:
    signals = []
    if no_data:
        signals.append(StatusSignal(code=StatusCode.NOT_AVAILABLE, text="Keine Umsaetze vorhanden"))
    return ActionResponse(
        fragments=[fragment(text, number=3 + i) for i, text in enumerate(texts)],
        status_signals=signals,
    )
