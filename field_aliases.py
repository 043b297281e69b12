# --- Sheet Header Aliases ---
# Each canonical header (the Japanese column name used in the sheet) is
# filled from the first non-empty alias, in the order listed.
FIELD_ALIASES = (
    ('会計日', ('会計日', 'businessDay', 'date')),
    ('顧客名', ('顧客名', 'customerName', 'name')),
    ('性別', ('性別', 'gender')),
    ('施術者', ('施術者', 'therapist', 'practitioner', 'staff')),
    ('お客様区分', ('お客様区分', 'customerType')),
    ('来店回数', ('来店回数', 'visitCount', 'visits')),
    ('経由', ('経由', 'source', 'channel')),
    ('回数券情報', ('回数券情報', 'ticketStatus', 'ticket')),
    ('売上金額', ('売上金額', 'salesAmount', 'amount')),
    ('次回予約', ('次回予約', 'hasNextReservation', 'next')),
    ('次回予約日', ('次回予約日', 'nextReservationDate', 'nextDate')),
)

CANONICAL_FIELDS = tuple(name for name, _ in FIELD_ALIASES)


def pick_first(fields, aliases):
    """Returns the first non-empty value among aliases, or an empty string."""
    for key in aliases:
        value = fields.get(key)
        if value is not None and str(value) != '':
            return str(value)
    return ''


def normalize_keys(fields, aliases=FIELD_ALIASES):
    """
    Maps a submission onto the sheet's header vocabulary.

    Every canonical header is present in the result. Keys that are not
    canonical are passed through untouched so a sheet column with that exact
    name still receives the value.
    """
    normalized = {name: pick_first(fields, candidates) for name, candidates in aliases}
    for key, value in fields.items():
        if key not in normalized:
            normalized[key] = '' if value is None else str(value)
    return normalized
