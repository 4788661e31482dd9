"""Builds the instruction prompt sent to the transcription model."""

DEFAULT_SPEAKERS = ["Speaker A"]

PROMPT_TEMPLATE = """Generate a transcript of the episode. Include timestamps and identify speakers.

Speakers are:
{speakers}

eg:
[00:00] Brady: Hello there.
[00:02] Tim: Hi Brady.

It is important to include the correct speaker names. Use the names you identified earlier. If you really don't know the speaker's name, identify them with a letter of the alphabet, eg there may be an unknown 'Speaker A' and another unknown 'Speaker B'.

If there is music or a short jingle playing, signify like so:
[01:02] [MUSIC] or [01:02] [JINGLE]

If you can identify the name of the music or jingle playing then use that instead, eg:
[01:02] [Firework by Katy Perry] or [01:02] [The Sofa Shop jingle]

If there is some other sound playing try to identify the sound, eg:
[01:02] [Bell ringing]

Each individual caption should be quite short, a few short sentences at most.

Signify the end of the episode with [END].

Don't use any markdown formatting, like bolding or italics."""


def build_prompt(speakers: list[str] | None = None) -> str:
    """
    Renders the transcription prompt for the given speakers.

    Args:
        speakers: Speaker names listed to the model, in order. Falls back to a
            single generic placeholder when empty.

    Returns:
        The prompt text.
    """
    speakers = speakers or DEFAULT_SPEAKERS
    speaker_lines = "\n".join(f"- {speaker}" for speaker in speakers)
    return PROMPT_TEMPLATE.format(speakers=speaker_lines)
