"""Simple two-language (de/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "de": "Armreif-Rechner",
        "en": "Bracelet Converter",
    },
    "greeting_title": {
        "de": "Hallo {name}",
        "en": "Hello {name}",
    },
    "greeting_date": {
        "de": "Heute ist der {date}",
        "en": "Today is {date}",
    },
    "btn_start": {
        "de": "Zeit umrechnen",
        "en": "Convert time",
    },
    "greeting_hint": {
        "de": "Lies die Zeit am Armreif ab – ich mache den Rest.",
        "en": "Read the time off the bracelet – I'll do the rest.",
    },
    "btn_back": {
        "de": "← Zurück",
        "en": "← Back",
    },
    "label_bracelet": {
        "de": "Armreif-Zeit ablesen",
        "en": "Read the bracelet",
    },
    "bracelet_hint": {
        "de": "Bewege den Regler auf eine gravierte Zeit",
        "en": "Move the knob onto an engraved time",
    },
    "label_date": {
        "de": "Datum wählen",
        "en": "Choose a date",
    },
    "result_empty": {
        "de": "Wähle eine Zeit am Armreif",
        "en": "Pick a time on the bracelet",
    },
    "result_none": {
        "de": "An diesem Tag erreicht die Sonne diese Höhe nicht.",
        "en": "The sun never reaches that altitude on this date.",
    },
    "label_read": {
        "de": "Armreif zeigt",
        "en": "Bracelet shows",
    },
    "label_true": {
        "de": "Echte Uhrzeit",
        "en": "True time",
    },
    "label_correction": {
        "de": "Korrektur",
        "en": "Correction",
    },
    "label_info": {
        "de": "Info",
        "en": "Info",
    },
    "info_body": {
        "de": "Der Armreif funktioniert wie eine Sonnenuhr. Er wurde an einem "
        "Referenzdatum kalibriert. Durch die sich ändernde Sonnenbahn im "
        "Jahresverlauf muss die angezeigte Zeit korrigiert werden.",
        "en": "The bracelet works like a sundial. It was calibrated on a "
        "reference date. Because the sun's path changes through the year, "
        "the time it shows has to be corrected.",
    },
    "info_reference": {
        "de": "Referenzdatum: {date}",
        "en": "Reference date: {date}",
    },
    "info_location": {
        "de": "Standort: {lat}, {lon}",
        "en": "Location: {lat}, {lon}",
    },
    "label_year_curve": {
        "de": "Korrektur im Jahresverlauf",
        "en": "Correction over the year",
    },
    "error_input": {
        "de": "Eingabe ungültig ({error})",
        "en": "Invalid input ({error})",
    },
    "axis_day": {
        "de": "Datum",
        "en": "Date",
    },
    "axis_correction": {
        "de": "Korrektur (min)",
        "en": "Correction (min)",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
