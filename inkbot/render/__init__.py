"""Render module -- LINE message payloads for schedule replies."""

from inkbot.render.projector import CardPayload, project, text_message

__all__ = [
    "CardPayload",
    "project",
    "text_message",
]
