"""
Localised display strings for the profile header.

A plain lookup table keyed by string id. Unknown locales fall back to English;
unknown keys resolve to the key itself so a missing translation is visible
rather than fatal.
"""

DEFAULT_LOCALE = 'en'


class UsersStrings:
    """String ids used by the profile header."""
    STATS_RANKED_SCORE = 'users.show.stats.ranked_score'
    STATS_HIT_ACCURACY = 'users.show.stats.hit_accuracy'
    STATS_PLAY_COUNT = 'users.show.stats.play_count'
    STATS_TOTAL_SCORE = 'users.show.stats.total_score'
    STATS_TOTAL_HITS = 'users.show.stats.total_hits'
    STATS_MAXIMUM_COMBO = 'users.show.stats.maximum_combo'
    STATS_REPLAYS_WATCHED_BY_OTHERS = 'users.show.stats.replays_watched_by_others'
    UNKNOWN_COUNTRY = 'users.show.unknown_country'
    OPEN_PROFILE = 'users.show.open_profile'
    REFRESH = 'users.show.refresh'


_STRINGS = {
    'en': {
        UsersStrings.STATS_RANKED_SCORE: 'Ranked Score',
        UsersStrings.STATS_HIT_ACCURACY: 'Hit Accuracy',
        UsersStrings.STATS_PLAY_COUNT: 'Play Count',
        UsersStrings.STATS_TOTAL_SCORE: 'Total Score',
        UsersStrings.STATS_TOTAL_HITS: 'Total Hits',
        UsersStrings.STATS_MAXIMUM_COMBO: 'Maximum Combo',
        UsersStrings.STATS_REPLAYS_WATCHED_BY_OTHERS: 'Replays Watched by Others',
        UsersStrings.UNKNOWN_COUNTRY: 'Alien',
        UsersStrings.OPEN_PROFILE: 'Open Profile',
        UsersStrings.REFRESH: 'Refresh',
    },
    'de': {
        UsersStrings.STATS_RANKED_SCORE: 'Ranglistenpunkte',
        UsersStrings.STATS_HIT_ACCURACY: 'Trefferquote',
        UsersStrings.STATS_PLAY_COUNT: 'Spielanzahl',
        UsersStrings.STATS_TOTAL_SCORE: 'Gesamtpunktzahl',
        UsersStrings.STATS_TOTAL_HITS: 'Treffer insgesamt',
        UsersStrings.STATS_MAXIMUM_COMBO: 'Maximale Combo',
        UsersStrings.STATS_REPLAYS_WATCHED_BY_OTHERS: 'Von anderen angesehene Wiederholungen',
        UsersStrings.UNKNOWN_COUNTRY: 'Alien',
        UsersStrings.OPEN_PROFILE: 'Profil öffnen',
        UsersStrings.REFRESH: 'Aktualisieren',
    },
}


def available_locales():
    return sorted(_STRINGS)


def localise(key: str, locale: str = DEFAULT_LOCALE) -> str:
    """Resolve a string id for a locale."""
    table = _STRINGS.get(locale) or _STRINGS[DEFAULT_LOCALE]
    if key in table:
        return table[key]
    return _STRINGS[DEFAULT_LOCALE].get(key, key)
