"""Split a linter's rule catalog into followed and unfollowed rules."""

from __future__ import annotations


class RuleMap:
    """Which catalog rules a project already follows.

    ``violated`` holds rule IDs the linter reported; ``enabled`` holds rule IDs
    a maintained config already turns on. A rule is unfollowed when it was
    violated and is not enabled yet; every other catalog rule is followed.
    Both lists keep catalog order.
    """

    def __init__(
        self,
        available: list[str],
        violated: list[str],
        enabled: list[str] | None = None,
    ) -> None:
        self.available = list(dict.fromkeys(available))
        self.violated = list(dict.fromkeys(violated))
        self.enabled = list(dict.fromkeys(enabled or []))

        violated_set = set(self.violated)
        enabled_set = set(self.enabled)
        self.unfollowed = [
            rule for rule in self.available
            if rule in violated_set and rule not in enabled_set
        ]
        unfollowed_set = set(self.unfollowed)
        self.followed = [rule for rule in self.available if rule not in unfollowed_set]

    @property
    def unknown(self) -> list[str]:
        """Violated rule IDs absent from the catalog."""
        known = set(self.available)
        return [rule for rule in self.violated if rule not in known]

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "followed": list(self.followed),
            "unfollowed": list(self.unfollowed),
            "enabled": list(self.enabled),
            "unknown": self.unknown,
        }

    def __repr__(self) -> str:
        return (
            f"RuleMap(available={len(self.available)}, "
            f"followed={len(self.followed)}, unfollowed={len(self.unfollowed)})"
        )
