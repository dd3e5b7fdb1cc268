"""Showcase — консольная демонстрация сущностей."""

from .runner import (
    SEPARATOR_CHAR,
    SEPARATOR_WIDTH,
    ShowcaseConfig,
    main,
    render_showcase,
)

__all__ = [
    "SEPARATOR_CHAR",
    "SEPARATOR_WIDTH",
    "ShowcaseConfig",
    "render_showcase",
    "main",
]
