"""Replaces generic speaker labels in a transcript with real names."""

import re

SPEAKER_PATTERN = re.compile(r"\bSpeaker ([A-Z])\b")


class SpeakerMap:
    """
    Assigns display names to generic speaker tokens in order of first sight.

    A token keeps the name it was first given. Once every display name has
    been handed out, further distinct tokens stay unmapped.
    """

    def __init__(self, names: list[str]):
        self._names = list(names)
        self._assignments: dict[str, str] = {}

    @property
    def assignments(self) -> dict[str, str]:
        return dict(self._assignments)

    def resolve(self, token: str) -> str | None:
        """Returns the display name for a token, assigning one if available."""
        if token in self._assignments:
            return self._assignments[token]
        if len(self._assignments) >= len(self._names):
            return None
        name = self._names[len(self._assignments)]
        self._assignments[token] = name
        return name


def relabel_speakers(transcript: str, speakers: list[str]) -> str:
    """
    Substitutes ``Speaker X`` tokens in a transcript with the given names.

    Args:
        transcript: Raw model output.
        speakers: Display names, assigned to tokens in order of first appearance.

    Returns:
        The transcript with every resolvable token replaced.
    """
    speaker_map = SpeakerMap(speakers)

    def _substitute(match: re.Match) -> str:
        name = speaker_map.resolve(match.group(0))
        return match.group(0) if name is None else name

    return SPEAKER_PATTERN.sub(_substitute, transcript)
