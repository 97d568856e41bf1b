"""
Types annotes pour les encodages incoherents de l'API TheTVDB v3.

L'API encode les valeurs absentes de facon variable : chaine vide, 0,
"0000-00-00 00:00:00" ou null. Les dates, heures et nombres sont souvent
des chaines. Chaque type ci-dessous combine :
- un BeforeValidator qui convertit la valeur brute (et accepte deja la
  valeur Python, pour la re-validation d'un modele serialise)
- un PlainSerializer qui reproduit l'encodage de l'API en mode JSON

Les ValueError levees ici sont converties par pydantic en ValidationError,
que le client remonte en JSONError.
"""

from datetime import date, datetime, time, timezone
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, PlainSerializer

DATE_FORMAT = "%Y-%m-%d"
DATE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
ZERO_DATE_TIME = "0000-00-00 00:00:00"

# Formats d'heure de diffusion rencontres ("9:00 PM", "9:00PM", "21:00")
AIR_TIME_FORMATS = ("%I:%M %p", "%I:%M%p", "%H:%M")


def parse_optional_string(value: Any) -> Optional[str]:
    """Chaine vide ou valeur non textuelle -> None."""
    if isinstance(value, str) and value:
        return value
    return None


def parse_optional_float(value: Any) -> Optional[float]:
    """null ou 0 -> None."""
    if value is None:
        return None
    number = float(value)
    if number == 0.0:
        return None
    return number


def parse_air_time(value: Any) -> Optional[time]:
    """
    Parse l'heure de diffusion d'une serie.

    Raises:
        ValueError: Si la chaine n'est dans aucun format connu
    """
    if value is None or isinstance(value, time):
        return value
    if not isinstance(value, str):
        raise ValueError(f"heure de diffusion invalide: {value!r}")
    text = value.strip()
    if not text:
        return None
    for fmt in AIR_TIME_FORMATS:
        try:
            return datetime.strptime(text.upper(), fmt).time()
        except ValueError:
            continue
    raise ValueError(f"heure de diffusion invalide: {value!r}")


def format_air_time(value: time) -> str:
    """Formate une heure comme l'API ("9:00 PM")."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def parse_optional_date(value: Any) -> Optional[date]:
    """Parse une date YYYY-MM-DD. Chaine vide -> None."""
    if value is None or isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"date invalide: {value!r}")
    if not value:
        return None
    return datetime.strptime(value, DATE_FORMAT).date()


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def parse_optional_date_time(value: Any) -> Optional[datetime]:
    """
    Parse une date-heure "YYYY-MM-DD HH:MM:SS" exprimee en UTC.

    Chaine vide ou date zero ("0000-00-00 00:00:00") -> None.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if not isinstance(value, str):
        raise ValueError(f"date-heure invalide: {value!r}")
    if not value or value == ZERO_DATE_TIME:
        return None
    parsed = datetime.strptime(value, DATE_TIME_FORMAT)
    return parsed.replace(tzinfo=timezone.utc)


def format_date_time(value: datetime) -> str:
    return value.astimezone(timezone.utc).strftime(DATE_TIME_FORMAT)


def parse_int_string(value: Any) -> int:
    """Parse un entier encode en chaine ("18" -> 18)."""
    if isinstance(value, bool):
        raise ValueError(f"entier invalide: {value!r}")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise ValueError(f"entier invalide: {value!r}")
    return int(value.strip())


def parse_timestamp(value: Any) -> datetime:
    """Convertit des secondes Unix en date-heure UTC."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"timestamp invalide: {value!r}")
    return datetime.fromtimestamp(int(value), tz=timezone.utc)


def parse_optional_timestamp(value: Any) -> Optional[datetime]:
    """Secondes Unix -> date-heure UTC. null ou 0 -> None."""
    if value is None or value == 0:
        return None
    return parse_timestamp(value)


def format_timestamp(value: datetime) -> int:
    return int(value.timestamp())


def parse_int_bool(value: Any) -> bool:
    """0 -> False, tout autre entier -> True."""
    if isinstance(value, bool):
        return value
    if not isinstance(value, int):
        raise ValueError(f"booleen entier invalide: {value!r}")
    return value != 0


OptionalString = Annotated[Optional[str], BeforeValidator(parse_optional_string)]

OptionalFloat = Annotated[Optional[float], BeforeValidator(parse_optional_float)]

OptionalAirTime = Annotated[
    Optional[time],
    BeforeValidator(parse_air_time),
    PlainSerializer(format_air_time, return_type=str, when_used="json-unless-none"),
]

OptionalDate = Annotated[
    Optional[date],
    BeforeValidator(parse_optional_date),
    PlainSerializer(format_date, return_type=str, when_used="json-unless-none"),
]

OptionalDateTime = Annotated[
    Optional[datetime],
    BeforeValidator(parse_optional_date_time),
    PlainSerializer(format_date_time, return_type=str, when_used="json-unless-none"),
]

IntString = Annotated[
    int,
    BeforeValidator(parse_int_string),
    PlainSerializer(str, return_type=str, when_used="json"),
]

Timestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=int, when_used="json"),
]

OptionalTimestamp = Annotated[
    Optional[datetime],
    BeforeValidator(parse_optional_timestamp),
    PlainSerializer(format_timestamp, return_type=int, when_used="json-unless-none"),
]

IntBool = Annotated[
    bool,
    BeforeValidator(parse_int_bool),
    PlainSerializer(int, return_type=int, when_used="json"),
]
