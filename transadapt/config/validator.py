"""Lightweight configuration validation utilities."""

from __future__ import annotations

from collections.abc import Mapping as MappingABC, MutableMapping as MutableMappingABC
from dataclasses import dataclass
from types import UnionType
from typing import Any, Dict, List, Literal, Mapping, Union, get_args, get_origin

from .schema import CoreConfig


@dataclass(frozen=True)
class ValidationError:
    """Represents a single configuration validation failure."""

    path: str
    message: str


class ConfigValidator:
    """Validate a configuration mapping against the ``CoreConfig`` schema."""

    _ROOT_SCHEMA = CoreConfig

    @classmethod
    def validate(cls, config: Mapping[str, Any]) -> List[ValidationError]:
        """Validate a configuration dictionary and return a list of errors."""
        if not isinstance(config, MappingABC):
            return [
                ValidationError(
                    path="<root>",
                    message="Expected a mapping for the configuration root",
                )
            ]
        errors = cls._validate_typed_dict(config, cls._ROOT_SCHEMA, path="")
        errors.extend(cls._validate_ranges(config))
        return errors

    @classmethod
    def validate_or_raise(cls, config: Mapping[str, Any]) -> None:
        """Validate the configuration and raise ValueError on failure."""
        errors = cls.validate(config)
        if errors:
            details = "\n".join(f"- {err.path}: {err.message}" for err in errors)
            raise ValueError(f"Configuration validation failed:\n{details}")

    # Internal helpers -----------------------------------------------------

    @classmethod
    def _validate_typed_dict(
        cls,
        value: Mapping[str, Any],
        schema: type[dict],
        path: str,
    ) -> List[ValidationError]:
        errors: List[ValidationError] = []
        annotations = cls._collect_annotations(schema)
        required_keys = getattr(schema, "__required_keys__", frozenset())

        for key in sorted(required_keys):
            if key not in value:
                errors.append(
                    ValidationError(
                        path=cls._join(path, key),
                        message="Required key is missing",
                    )
                )

        for key in sorted(value.keys()):
            annotation = annotations.get(key)
            if annotation is None:
                errors.append(
                    ValidationError(
                        path=cls._join(path, key),
                        message=f"Unexpected key for {schema.__name__}",
                    )
                )
                continue
            errors.extend(
                cls._validate_annotation(value[key], annotation, cls._join(path, key))
            )

        return errors

    @classmethod
    def _validate_annotation(cls, value: Any, annotation: Any, path: str) -> List[ValidationError]:
        if not cls._matches_type(value, annotation):
            return [
                ValidationError(
                    path=path,
                    message=f"Expected {cls._describe_annotation(annotation)}, got {type(value).__name__}",
                )
            ]

        if cls._is_union(annotation):
            for option in get_args(annotation):
                if option is not type(None) and cls._matches_type(value, option):
                    return cls._validate_annotation(value, option, path)
            return []

        if cls._is_typed_dict(annotation):
            return cls._validate_typed_dict(value, annotation, path)

        return []

    @classmethod
    def _validate_ranges(cls, config: Mapping[str, Any]) -> List[ValidationError]:
        """Checks that the type schema cannot express."""
        errors: List[ValidationError] = []
        translation = config.get("translation")
        if not isinstance(translation, MappingABC):
            return errors
        retry = translation.get("retry")
        if not isinstance(retry, MappingABC):
            return errors

        checks = (
            ("max_attempts", 1, "must be >= 1"),
            ("base_delay", 0, "must be >= 0"),
            ("multiplier", 1, "must be >= 1"),
        )
        for key, minimum, message in checks:
            value = retry.get(key)
            if isinstance(value, (int, float)) and not isinstance(value, bool) and value < minimum:
                errors.append(
                    ValidationError(path=f"translation.retry.{key}", message=message)
                )
        return errors

    @classmethod
    def _matches_type(cls, value: Any, annotation: Any) -> bool:
        if annotation is Any:
            return True

        if annotation is type(None):
            return value is None

        if cls._is_union(annotation):
            return any(cls._matches_type(value, option) for option in get_args(annotation))

        if cls._is_typed_dict(annotation):
            return isinstance(value, MappingABC)

        origin = get_origin(annotation)

        if origin is Literal:
            return value in get_args(annotation)

        if origin in cls._MAPPING_ORIGINS:
            return isinstance(value, MappingABC)

        if isinstance(annotation, type):
            if annotation is float:
                return isinstance(value, (int, float)) and not isinstance(value, bool)
            if annotation is int:
                return isinstance(value, int) and not isinstance(value, bool)
            return isinstance(value, annotation)

        return True

    @staticmethod
    def _collect_annotations(schema: type[dict]) -> Dict[str, Any]:
        annotations: Dict[str, Any] = {}
        for base in reversed(schema.__mro__):
            annotations.update(getattr(base, "__annotations__", {}))
        return annotations

    @staticmethod
    def _join(path: str, key: str) -> str:
        return key if not path else f"{path}.{key}"

    @classmethod
    def _is_typed_dict(cls, annotation: Any) -> bool:
        return isinstance(annotation, type) and issubclass(annotation, dict) and hasattr(annotation, "__required_keys__")

    @classmethod
    def _is_union(cls, annotation: Any) -> bool:
        origin = get_origin(annotation)
        return origin is Union or origin is UnionType

    @classmethod
    def _describe_annotation(cls, annotation: Any) -> str:
        if annotation is Any:
            return "any type"
        if annotation is type(None):
            return "None"
        if cls._is_union(annotation):
            options = " | ".join(cls._describe_annotation(opt) for opt in get_args(annotation))
            return f"({options})"
        if cls._is_typed_dict(annotation):
            return f"{annotation.__name__} structure"
        origin = get_origin(annotation)
        if origin is Literal:
            values = ", ".join(repr(arg) for arg in get_args(annotation))
            return f"literal ({values})"
        if origin in cls._MAPPING_ORIGINS:
            return "mapping"
        if isinstance(annotation, type):
            return annotation.__name__
        return str(annotation)

    _MAPPING_ORIGINS = {
        dict,
        MappingABC,
        MutableMappingABC,
    }
