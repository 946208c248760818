"""Declarative output contracts.

A `Contract` is a tree of field specifications. From that one declaration we
derive the schema document embedded in prompts (`describe`), the structural
gate every model response must pass (`validate`), and the zero-value record
used by the fallback path (`empty_default`).

Example:
    contract = Contract(
        name="Summary",
        fields={
            "summary": Scalar("string", "One-paragraph summary."),
            "colorPalette": ArrayOf(Scalar("string"), "Hex colors."),
        },
        primary="summary",
    )
    contract.validate({"summary": "ok", "colorPalette": []})
"""

from __future__ import annotations

from collections.abc import Mapping
import dataclasses
import json
from types import MappingProxyType
import typing

from crystal_design.core.exceptions import ContractDefinitionError, ValidationError
from crystal_design.core.types import Failure, Result, Success, Violation

Kind = typing.Literal["string", "number", "integer", "boolean", "enum"]
_KINDS: tuple[str, ...] = typing.get_args(Kind)

_JSON_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "string": "string",
        "number": "number",
        "integer": "integer",
        "boolean": "boolean",
        "enum": "string",
    }
)

MISSING = "missing"


@dataclasses.dataclass(frozen=True, slots=True)
class Scalar:
    """A single string, number, integer, boolean or enum value."""

    kind: Kind
    description: str = ""
    choices: tuple[str, ...] = ()
    optional: bool = False

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ContractDefinitionError(
                f"Unknown scalar kind {self.kind!r}; expected one of {_KINDS}"
            )
        if self.kind == "enum" and not self.choices:
            raise ContractDefinitionError("enum scalars must declare choices")
        if self.kind != "enum" and self.choices:
            raise ContractDefinitionError("only enum scalars may declare choices")
        object.__setattr__(self, "choices", tuple(self.choices))

    @property
    def expected(self) -> str:
        """Expected-kind label used in violations."""
        if self.kind == "enum":
            return "one of " + ", ".join(self.choices)
        return self.kind

    def matches(self, value: typing.Any) -> bool:
        """Return True when ``value`` is of this scalar's kind."""
        if self.kind == "string":
            return isinstance(value, str)
        if self.kind == "boolean":
            return isinstance(value, bool)
        if isinstance(value, bool):
            return False
        if self.kind == "number":
            return isinstance(value, int | float)
        if self.kind == "integer":
            return isinstance(value, int) or (
                isinstance(value, float) and value.is_integer()
            )
        return isinstance(value, str) and value in self.choices

    def zero(self) -> typing.Any:
        """The empty default for this kind."""
        match self.kind:
            case "string":
                return ""
            case "number" | "integer":
                return 0
            case "boolean":
                return False
            case _:
                return self.choices[0]

    def describe(self) -> dict[str, typing.Any]:
        node: dict[str, typing.Any] = {"type": _JSON_TYPES[self.kind]}
        if self.choices:
            node["enum"] = list(self.choices)
        if self.description:
            node["description"] = self.description
        return node


def OptionalScalar(  # noqa: N802
    kind: Kind, description: str = "", choices: tuple[str, ...] = ()
) -> Scalar:
    """Declare a scalar field that may be omitted."""
    return Scalar(kind, description, choices, optional=True)


@dataclasses.dataclass(frozen=True, slots=True)
class ObjectField:
    """A nested record described by its own Contract."""

    contract: Contract
    description: str = ""
    optional: bool = False

    @property
    def expected(self) -> str:
        return "object"

    def describe(self) -> dict[str, typing.Any]:
        node = self.contract.describe()
        if self.description:
            node["description"] = self.description
        return node


@dataclasses.dataclass(frozen=True, slots=True)
class ArrayOf:
    """A homogeneous array of scalars or nested records."""

    element: Scalar | ObjectField
    description: str = ""
    optional: bool = False
    min_items: int = 0
    max_items: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.element, Scalar) and self.element.optional:
            raise ContractDefinitionError("array elements cannot be optional")
        if self.min_items < 0:
            raise ContractDefinitionError("min_items must be >= 0")
        if self.max_items is not None and self.max_items < self.min_items:
            raise ContractDefinitionError("max_items must be >= min_items")

    @property
    def expected(self) -> str:
        return "array"

    @property
    def holds_strings(self) -> bool:
        return isinstance(self.element, Scalar) and self.element.kind == "string"

    def describe(self) -> dict[str, typing.Any]:
        node: dict[str, typing.Any] = {
            "type": "array",
            "items": self.element.describe(),
        }
        if self.min_items:
            node["minItems"] = self.min_items
        if self.max_items is not None:
            node["maxItems"] = self.max_items
        if self.description:
            node["description"] = self.description
        return node


FieldSpec = Scalar | ArrayOf | ObjectField


@dataclasses.dataclass(frozen=True)
class Contract:
    """The declared output shape of one AI task (or of a nested record).

    Attributes:
        name: Identifier used in logs and the schema document.
        fields: Ordered mapping of field name to specification.
        primary: Dotted path of the primary narrative field. Required for
            task-level contracts; nested record contracts may leave it unset.
        description: Optional description rendered into the schema document.
    """

    name: str
    fields: Mapping[str, FieldSpec]
    primary: str | None = None
    description: str = ""

    def __post_init__(self) -> None:
        if not self.fields:
            raise ContractDefinitionError(f"{self.name}: contract has no fields")
        for field_name, spec in self.fields.items():
            if not isinstance(spec, Scalar | ArrayOf | ObjectField):
                raise ContractDefinitionError(
                    f"{self.name}.{field_name}: unsupported field spec "
                    f"{type(spec).__name__}"
                )
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        if self.primary is not None:
            self._check_primary(self.primary)

    def _check_primary(self, path: str) -> None:
        contract: Contract = self
        parts = path.split(".")
        for depth, part in enumerate(parts):
            spec = contract.fields.get(part)
            is_last = depth == len(parts) - 1
            if spec is None or spec.optional:
                raise ContractDefinitionError(
                    f"{self.name}: primary field {path!r} must be required"
                )
            if is_last:
                if not (isinstance(spec, Scalar) and spec.kind == "string"):
                    raise ContractDefinitionError(
                        f"{self.name}: primary field {path!r} must be a string"
                    )
            elif isinstance(spec, ObjectField):
                contract = spec.contract
            else:
                raise ContractDefinitionError(
                    f"{self.name}: primary path {path!r} crosses a non-object field"
                )

    @property
    def primary_path(self) -> tuple[str, ...]:
        """The primary narrative field as path segments."""
        if self.primary is None:
            raise ContractDefinitionError(
                f"{self.name}: contract has no primary narrative field"
            )
        return tuple(self.primary.split("."))

    # --- Schema document ---

    def describe(self) -> dict[str, typing.Any]:
        """Render the JSON-schema-like tree embedded in prompts."""
        node: dict[str, typing.Any] = {"type": "object"}
        if self.description:
            node["description"] = self.description
        node["properties"] = {
            name: spec.describe() for name, spec in self.fields.items()
        }
        required = [name for name, spec in self.fields.items() if not spec.optional]
        if required:
            node["required"] = required
        return node

    def describe_json(self) -> str:
        """The schema document serialized with indentation."""
        return json.dumps(self.describe(), indent=2, ensure_ascii=False)

    # --- Validation ---

    def validate(self, value: typing.Any) -> Result[dict[str, typing.Any], ValidationError]:
        """Check ``value`` against the contract, collecting every violation.

        Unknown keys are ignored and do not appear in the validated record.

        Returns:
            `Success` with a fresh record holding only declared fields, or
            `Failure` carrying a `ValidationError` with all violations.
        """
        violations: list[Violation] = []
        if not isinstance(value, dict):
            violations.append(Violation("", "object", _found(value)))
            return Failure(ValidationError(violations))
        record = _walk_object(self, value, "", violations)
        if violations:
            return Failure(ValidationError(violations))
        return Success(record)

    # --- Zero values ---

    def empty_default(self) -> dict[str, typing.Any]:
        """A structurally valid zero record; optional fields are omitted."""
        record: dict[str, typing.Any] = {}
        for name, spec in self.fields.items():
            if spec.optional:
                continue
            record[name] = _zero(spec)
        return record


def _zero(spec: FieldSpec) -> typing.Any:
    if isinstance(spec, Scalar):
        return spec.zero()
    if isinstance(spec, ObjectField):
        return spec.contract.empty_default()
    if isinstance(spec.element, ObjectField):
        return [spec.element.contract.empty_default() for _ in range(spec.min_items)]
    return [spec.element.zero() for _ in range(spec.min_items)]


def _join(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name


def _found(value: typing.Any) -> str:
    """Describe a JSON value's kind for diagnostics."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _walk_object(
    contract: Contract,
    value: dict[str, typing.Any],
    prefix: str,
    violations: list[Violation],
) -> dict[str, typing.Any]:
    record: dict[str, typing.Any] = {}
    for name, spec in contract.fields.items():
        path = _join(prefix, name)
        present = name in value and not (spec.optional and value[name] is None)
        if not present:
            if not spec.optional:
                violations.append(Violation(path, spec.expected, MISSING))
            continue
        checked = _walk_field(spec, value[name], path, violations)
        if checked is not _INVALID:
            record[name] = checked
    return record


_INVALID = object()


def _walk_field(
    spec: FieldSpec,
    value: typing.Any,
    path: str,
    violations: list[Violation],
) -> typing.Any:
    if isinstance(spec, Scalar):
        if spec.matches(value):
            return value
        found = _found(value)
        if spec.kind == "enum" and isinstance(value, str):
            found = f"string {json.dumps(value, ensure_ascii=False)}"
        violations.append(Violation(path, spec.expected, found))
        return _INVALID

    if isinstance(spec, ObjectField):
        if not isinstance(value, dict):
            violations.append(Violation(path, "object", _found(value)))
            return _INVALID
        return _walk_object(spec.contract, value, path, violations)

    if not isinstance(value, list):
        violations.append(Violation(path, "array", _found(value)))
        return _INVALID
    if len(value) < spec.min_items:
        violations.append(
            Violation(
                path,
                f"array with at least {spec.min_items} item(s)",
                f"array of {len(value)}",
            )
        )
    if spec.max_items is not None and len(value) > spec.max_items:
        violations.append(
            Violation(
                path,
                f"array with at most {spec.max_items} item(s)",
                f"array of {len(value)}",
            )
        )
    items = []
    for index, item in enumerate(value):
        checked = _walk_field(spec.element, item, f"{path}[{index}]", violations)
        if checked is not _INVALID:
            items.append(checked)
    return items
