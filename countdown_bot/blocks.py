"""
countdown_bot/blocks.py

Slack "blocks" message model and the countdown message layout.

The payload is a tuple of display blocks (header, section, context), each
carrying plain_text or mrkdwn text objects. Everything here is immutable so
the same RemainingDuration always renders to an equal payload.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from .countdown import RemainingDuration


# =============================================================================
# Message Text
# =============================================================================

HEADER_TEXT = "🚀 Dreamers in Tech Hackathon Countdown"
INTRO_TEXT = "*Kick-off Ceremony begins in:*"
DAYS_LABEL = "*Days*"
TIME_LABEL = "*Time (HH:MM:SS)*"
FOOTER_TEXT = "📅 Friday, July 18 • 5pm PST / 7pm CST / 8pm EST"
STARTED_TEXT = "🎉 *The Dreamers in Tech Hackathon has begun!* 🎉"


# =============================================================================
# Block Model
# =============================================================================

class TextType(str, Enum):
    """Slack text object formats."""
    PLAIN = "plain_text"
    MARKDOWN = "mrkdwn"


@dataclass(frozen=True)
class TextObject:
    """A piece of text and how Slack should render it."""

    text: str
    type: TextType = TextType.MARKDOWN

    @classmethod
    def plain(cls, text: str) -> "TextObject":
        return cls(text=text, type=TextType.PLAIN)

    @classmethod
    def markdown(cls, text: str) -> "TextObject":
        return cls(text=text, type=TextType.MARKDOWN)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "text": self.text}


@dataclass(frozen=True)
class HeaderBlock:
    """Large title line. Slack only accepts plain_text here."""

    text: TextObject

    def __post_init__(self):
        if self.text.type is not TextType.PLAIN:
            raise ValueError("Header blocks require plain_text")

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "header", "text": self.text.to_dict()}


@dataclass(frozen=True)
class SectionBlock:
    """
    Body block with a text line, a row of fields, or both.

    Attributes:
        text: Main text of the section.
        fields: Short texts laid out side by side.
    """

    text: Optional[TextObject] = None
    fields: Tuple[TextObject, ...] = ()

    def __post_init__(self):
        if self.text is None and not self.fields:
            raise ValueError("Section blocks need text or fields")

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": "section"}
        if self.text is not None:
            data["text"] = self.text.to_dict()
        if self.fields:
            data["fields"] = [field.to_dict() for field in self.fields]
        return data


@dataclass(frozen=True)
class ContextBlock:
    """Small footer line(s)."""

    elements: Tuple[TextObject, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "context",
            "elements": [element.to_dict() for element in self.elements],
        }


Block = Union[HeaderBlock, SectionBlock, ContextBlock]


@dataclass(frozen=True)
class MessagePayload:
    """A complete webhook message."""

    blocks: Tuple[Block, ...]

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the webhook JSON document.

        Returns:
            Dictionary of the form {"blocks": [...]}.
        """
        return {"blocks": [block.to_dict() for block in self.blocks]}


# =============================================================================
# Countdown Layout
# =============================================================================

def format_message(remaining: RemainingDuration) -> MessagePayload:
    """
    Build the countdown message for a remaining duration.

    Args:
        remaining: Output of compute_remaining().

    Returns:
        A single "has begun" section once the target is reached, otherwise
        the header / intro / days+time / footer layout.
    """
    if remaining.reached:
        return MessagePayload(blocks=(
            SectionBlock(text=TextObject.markdown(STARTED_TEXT)),
        ))

    return MessagePayload(blocks=(
        HeaderBlock(text=TextObject.plain(HEADER_TEXT)),
        SectionBlock(text=TextObject.markdown(INTRO_TEXT)),
        SectionBlock(fields=(
            TextObject.markdown(f"{DAYS_LABEL}\n{remaining.days}"),
            TextObject.markdown(f"{TIME_LABEL}\n{remaining.time_of_day}"),
        )),
        ContextBlock(elements=(TextObject.markdown(FOOTER_TEXT),)),
    ))
