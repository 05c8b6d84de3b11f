"""User-selected congress, session and chamber toggles."""

from dataclasses import dataclass

# Year the 1st Congress convened
FIRST_CONGRESS_YEAR = 1789


def year_for_congress(congress: int, session: int) -> int:
    """Calendar year a congress session falls in.

    Each Congress spans two years, one per session: the 118th Congress
    covers 2023 (session 1) and 2024 (session 2).
    """
    return FIRST_CONGRESS_YEAR + (congress - 1) * 2 + (session - 1)


@dataclass(frozen=True)
class VoteSettings:
    """Which period and chambers to fetch votes for."""

    congress: int = 118
    session: int = 2
    include_house: bool = True
    include_senate: bool = True

    @property
    def year(self) -> int:
        return year_for_congress(self.congress, self.session)

    @property
    def has_chamber(self) -> bool:
        return self.include_house or self.include_senate

    @classmethod
    def from_dict(cls, data: dict) -> "VoteSettings":
        """Merge a stored or submitted mapping over the defaults.

        Accepts the persisted camelCase keys as well as snake_case. Values of
        the wrong type or out of range (congress below 1, session other than
        1 or 2) keep the default for that field.
        """
        defaults = cls()
        if not isinstance(data, dict):
            return defaults

        def pick(names: tuple[str, ...], expected: type, default):
            for name in names:
                if name not in data:
                    continue
                value = data[name]
                # bool is a subclass of int; keep them apart
                if expected is int and isinstance(value, bool):
                    return default
                if isinstance(value, expected):
                    return value
                return default
            return default

        congress = pick(("congress",), int, defaults.congress)
        if congress < 1:
            congress = defaults.congress
        session = pick(("session",), int, defaults.session)
        if session not in (1, 2):
            session = defaults.session

        return cls(
            congress=congress,
            session=session,
            include_house=pick(
                ("includeHouse", "include_house"), bool, defaults.include_house
            ),
            include_senate=pick(
                ("includeSenate", "include_senate"), bool, defaults.include_senate
            ),
        )

    def to_dict(self) -> dict:
        """Persisted shape of the settings."""
        return {
            "congress": self.congress,
            "session": self.session,
            "includeHouse": self.include_house,
            "includeSenate": self.include_senate,
        }
