# lessonpages/domain/blocks.py
"""
Content block model.

A block row stores its payload as an opaque JSON text blob. The payload
shape depends on the block `type`; this module owns the typed variants and
the translation between the stored blob and those variants.

Read path is permissive: corrupt or partial blobs decode to defaults so a
public page still renders. Write path validates (quiz only, the other
variants default every missing field).
"""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Type, Union

from .exceptions import ValidationError

VIDEO_MODES = ("youtube", "mp4")
DEFAULT_CALLOUT_KIND = "Key idea"


def _text(data: Dict[str, Any], key: str, default: str = "") -> str:
    value = data.get(key)
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)


@dataclass
class TextPayload:
    heading: str = ""
    body: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TextPayload":
        return cls(heading=_text(data, "heading"), body=_text(data, "body"))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ImagePayload:
    heading: str = ""
    image_url: str = ""
    caption: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImagePayload":
        return cls(
            heading=_text(data, "heading"),
            image_url=_text(data, "imageUrl"),
            caption=_text(data, "caption"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "heading": self.heading,
            "imageUrl": self.image_url,
            "caption": self.caption,
        }


@dataclass
class VideoPayload:
    heading: str = ""
    mode: str = "youtube"
    youtube_url: str = ""
    mp4_url: str = ""
    caption: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VideoPayload":
        mode = _text(data, "mode", "youtube") or "youtube"
        if mode not in VIDEO_MODES:
            mode = "youtube"

        return cls(
            heading=_text(data, "heading"),
            mode=mode,
            youtube_url=_text(data, "youtubeUrl"),
            mp4_url=_text(data, "mp4Url"),
            caption=_text(data, "caption"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "heading": self.heading,
            "mode": self.mode,
            "youtubeUrl": self.youtube_url,
            "mp4Url": self.mp4_url,
            "caption": self.caption,
        }


@dataclass
class CalloutPayload:
    kind: str = DEFAULT_CALLOUT_KIND
    body: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CalloutPayload":
        return cls(
            kind=_text(data, "kind", DEFAULT_CALLOUT_KIND) or DEFAULT_CALLOUT_KIND,
            body=_text(data, "body"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class QuizQuestion:
    question: str = ""
    options: List[str] = field(default_factory=list)
    answer: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "QuizQuestion":
        if not isinstance(data, dict):
            return cls()

        raw_options = data.get("options")
        options = [str(o) for o in raw_options] if isinstance(raw_options, list) else []

        answer = data.get("answer", 0)
        if isinstance(answer, bool) or not isinstance(answer, int):
            try:
                answer = int(answer)
            except (TypeError, ValueError, OverflowError):
                answer = 0

        return cls(question=_text(data, "q"), options=options, answer=answer)

    def to_dict(self) -> Dict[str, Any]:
        return {"q": self.question, "options": list(self.options), "answer": self.answer}


@dataclass
class QuizPayload:
    title: str = ""
    questions: List[QuizQuestion] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuizPayload":
        questions = data.get("questions")
        if not isinstance(questions, list):
            questions = []

        return cls(
            title=_text(data, "title"),
            questions=[QuizQuestion.from_dict(q) for q in questions],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "questions": [q.to_dict() for q in self.questions],
        }


BlockPayload = Union[TextPayload, ImagePayload, VideoPayload, CalloutPayload, QuizPayload]

# Tag -> variant. Decoding dispatches on this, never on the blob's shape.
BLOCK_TYPES: Dict[str, Type[Any]] = {
    "text": TextPayload,
    "image": ImagePayload,
    "video": VideoPayload,
    "callout": CalloutPayload,
    "quiz": QuizPayload,
}


def payload_class(block_type: str) -> Type[Any]:
    try:
        return BLOCK_TYPES[block_type]
    except KeyError:
        raise ValidationError(f"Invalid block type: {block_type!r}") from None


def empty_payload(block_type: str) -> BlockPayload:
    return payload_class(block_type)()


def default_payload(block_type: str) -> BlockPayload:
    """Seed content for a freshly added block."""
    if block_type == "quiz":
        return QuizPayload(
            title="Quick Quiz",
            questions=[
                QuizQuestion(
                    question="Sample question 1?",
                    options=["A", "B", "C", "D"],
                    answer=0,
                )
            ],
        )
    return empty_payload(block_type)


def encode_payload(payload: BlockPayload) -> str:
    return json.dumps(payload.to_dict(), ensure_ascii=False)


def decode_payload(block_type: str, raw: Union[str, bytes, None]) -> BlockPayload:
    """
    Decode a stored blob into the variant named by `block_type`.

    Never raises on bad data: unparsable text or a non-object document
    yields the empty payload for the type.
    """
    cls = payload_class(block_type)

    if raw is None:
        return cls()

    try:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        data = json.loads(raw)
    except (UnicodeDecodeError, ValueError, RecursionError):
        return cls()

    if not isinstance(data, dict):
        return cls()

    return cls.from_dict(data)


def validate_edit(
    block_type: str,
    submitted: Dict[str, Any],
    previous: Optional[BlockPayload] = None,
) -> BlockPayload:
    """
    Build the payload to store from an editor submission.

    Quiz submissions arrive either as `quiz_json` text or as the quiz
    object itself. Anything that is not an object with a `questions` list
    is rejected, carrying the previous payload back for redisplay.
    """
    cls = payload_class(block_type)

    if block_type != "quiz":
        return cls.from_dict(submitted or {})

    if "quiz_json" in submitted:
        raw = submitted.get("quiz_json")
        try:
            parsed = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
        except (ValueError, RecursionError):
            parsed = None
    else:
        parsed = submitted

    if not isinstance(parsed, dict) or not isinstance(parsed.get("questions"), list):
        previous_data = previous.to_dict() if previous is not None else {}
        raise ValidationError(
            "Invalid quiz JSON. Ensure it has { title, questions: [...] }.",
            context={"data": previous_data},
        )

    return QuizPayload.from_dict(parsed)
