"""
Canada (federal) holidays.

Provider id "CA", anchored in America/Toronto. Names are given in English
(en_US) and Canadian French (fr_CA); holidays taken from shared groups use
the groups' names.

Holiday ids are stable. Remembrance Day uses the id "remembranceDay"; the
misspelled "rememberanceDay" found in older data is not used.
"""
from __future__ import annotations

from ..engine import GroupRef, ProviderDefinition, rule

CANADA = ProviderDefinition(
    id="CA",
    name="Canada",
    timezone="America/Toronto",
    groups=(
        GroupRef("CommonHolidays", only=("newYearsDay",)),
        GroupRef("ChristianHolidays", only=("goodFriday", "easterMonday", "christmasDay")),
    ),
    rules=(
        # Called Dominion Day until 1982.
        rule(
            "canadaDay",
            {"en_US": "Canada Day", "fr_CA": "Fête du Canada"},
            "july 1",
            since=1867,
        ),
        rule(
            "labourDay",
            {"en_US": "Labour Day", "fr_CA": "Fête du travail"},
            "first monday of september",
        ),
        # Last Monday preceding May 25.
        rule(
            "victoriaDay",
            {"en_US": "Victoria Day", "fr_CA": "Fête de la Reine ou Journée nationale des Patriotes"},
            "monday on or before may 24",
        ),
        rule(
            "thanksgiving",
            {"en_US": "Thanksgiving", "fr_CA": "Action de grâce"},
            "second monday of october",
        ),
        rule(
            "remembranceDay",
            {"en_US": "Remembrance Day", "fr_CA": "Jour du Souvenir"},
            "november 11",
            since=1919,
        ),
        rule(
            "boxingDay",
            {"en_US": "Boxing Day", "fr_CA": "Lendemain de Noël"},
            "december 26",
        ),
    ),
)
