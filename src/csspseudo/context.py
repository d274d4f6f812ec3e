from __future__ import annotations

from .capabilities import CssProfile, CssVersion, parse_profile, parse_version


class ValidationContext:
    __slots__ = ("lang", "profile", "version")

    version: CssVersion
    profile: CssProfile
    lang: str

    def __init__(
        self,
        version: CssVersion | str = CssVersion.CSS3,
        profile: CssProfile | str | None = CssProfile.DEFAULT,
        lang: str = "en",
    ) -> None:
        self.version = parse_version(version)
        self.profile = parse_profile(profile)
        self.lang = lang

    def __repr__(self) -> str:
        return f"ValidationContext({self.version.name}, {self.profile.name}, lang={self.lang!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationContext):
            return NotImplemented
        return self.version == other.version and self.profile == other.profile and self.lang == other.lang

    def __hash__(self) -> int:
        return hash((self.version, self.profile, self.lang))


DEFAULT_CONTEXT: ValidationContext = ValidationContext()
