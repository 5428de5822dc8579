#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML to Maud conversion.

This module defines the three independent style enumerations and the frozen
``MaudConfig`` dataclass that carries them through one conversion. Values
arriving as free-form strings (CLI flags, environment variables, config
files) are decoded by total parse functions that fall back to a documented
default instead of failing.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Callable, Mapping, TypeVar

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)

_E = TypeVar("_E", bound=Enum)


class Render(str, Enum):
    """How the walked buffers are wrapped into the final document."""

    AUTO = "auto"
    FULL = "full"
    ONLY_BODY = "onlyBody"


class IdStyle(str, Enum):
    """How an element's first id is written."""

    FULL = "full"
    SHORT = "short"
    SHORT_NO_DIV = "shortNoDiv"


class ClassStyle(str, Enum):
    """How an element's classes are written."""

    FULL = "full"
    SHORT = "short"
    SHORT_NO_DIV = "shortNoDiv"


DEFAULT_RENDER = Render.AUTO
DEFAULT_ID_STYLE = IdStyle.FULL
DEFAULT_CLASS_STYLE = ClassStyle.FULL


def _normalize_token(value: str) -> str:
    return value.strip().replace("-", "").replace("_", "").lower()


def _parse_enum(enum_cls: type[_E], value: Any, default: _E) -> _E:
    if isinstance(value, enum_cls):
        return value

    if isinstance(value, str):
        token = _normalize_token(value)
        for member in enum_cls:
            if token in (_normalize_token(member.value), _normalize_token(member.name)):
                return member

    logger.warning(f"Unrecognized {enum_cls.__name__} value {value!r}, using {default.value!r}")
    return default


def parse_render(value: Any) -> Render:
    """Decode a render mode, falling back to ``Render.AUTO``.

    Matching ignores case and ``-``/``_`` separators, so ``"onlyBody"``,
    ``"only-body"`` and ``"ONLY_BODY"`` all decode to ``Render.ONLY_BODY``.

    Parameters
    ----------
    value : Any
        A ``Render`` member or its string form

    Returns
    -------
    Render
        The decoded mode, or the default for anything unrecognized

    """
    return _parse_enum(Render, value, DEFAULT_RENDER)


def parse_id_style(value: Any) -> IdStyle:
    """Decode an id style, falling back to ``IdStyle.FULL``."""
    return _parse_enum(IdStyle, value, DEFAULT_ID_STYLE)


def parse_class_style(value: Any) -> ClassStyle:
    """Decode a class style, falling back to ``ClassStyle.FULL``."""
    return _parse_enum(ClassStyle, value, DEFAULT_CLASS_STYLE)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class MaudConfig(CloneFrozenMixin):
    """Configuration for converting HTML into Maud markup.

    Each field is orthogonal and individually selectable. The object is
    immutable for the duration of a conversion.

    Parameters
    ----------
    render : Render, default Render.AUTO
        Whether to wrap output as a full document, body only, or decide from
        the input text.
    id_style : IdStyle, default IdStyle.FULL
        Write ids as ``id="..."`` or as ``#shorthand``. ``SHORT_NO_DIV`` also
        drops the ``div`` tag name when the element has an id.
    class_style : ClassStyle, default ClassStyle.FULL
        Write classes as ``class="..."`` or as ``.shorthand`` tokens.
        ``SHORT_NO_DIV`` also drops the ``div`` tag name when the element has
        classes.

    Examples
    --------
        >>> config = MaudConfig(id_style=IdStyle.SHORT)
        >>> config.create_updated(render=Render.FULL).render
        <Render.FULL: 'full'>

    """

    render: Render = field(
        default=DEFAULT_RENDER,
        metadata={
            "help": "Document wrapping: full document, body only, or auto-detect from the input",
            "choices": [member.value for member in Render],
            "parse": parse_render,
            "serialized_name": "render",
        },
    )
    id_style: IdStyle = field(
        default=DEFAULT_ID_STYLE,
        metadata={
            "help": "Id attribute style: id=\"...\", #shorthand, or #shorthand with implicit div",
            "choices": [member.value for member in IdStyle],
            "parse": parse_id_style,
            "serialized_name": "idStyle",
        },
    )
    class_style: ClassStyle = field(
        default=DEFAULT_CLASS_STYLE,
        metadata={
            "help": "Class attribute style: class=\"...\", .shorthand, or .shorthand with implicit div",
            "choices": [member.value for member in ClassStyle],
            "parse": parse_class_style,
            "serialized_name": "classStyle",
        },
    )

    def __post_init__(self) -> None:
        """Coerce string values into their enum members.

        Unrecognized values fall back to the field default with a warning.
        """
        for config_field in fields(self):
            parse: Callable[[Any], Enum] = config_field.metadata["parse"]
            object.__setattr__(self, config_field.name, parse(getattr(self, config_field.name)))

    def to_dict(self) -> dict[str, str]:
        """Serialize to a mapping of camelCase keys to enum values."""
        return {f.metadata["serialized_name"]: getattr(self, f.name).value for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MaudConfig:
        """Build a config from a persisted mapping.

        Both camelCase (``idStyle``) and snake_case (``id_style``) keys are
        accepted. Missing keys take the field default; unknown keys are
        ignored and unrecognized values fall back leniently.

        Parameters
        ----------
        data : Mapping[str, Any]
            Decoded settings, e.g. from JSON, TOML or YAML

        Returns
        -------
        MaudConfig
            The decoded configuration

        """
        kwargs: dict[str, Any] = {}
        for config_field in fields(cls):
            for key in (config_field.metadata["serialized_name"], config_field.name):
                if key in data:
                    kwargs[config_field.name] = data[key]
                    break
        return cls(**kwargs)
