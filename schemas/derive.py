"""Derive request/response schemas from table models.

Every entity gets three pydantic models built from its mapped columns:

- ``create``: the insertable projection. Server-managed columns (identity and
  ``created_at`` / ``updated_at``) are dropped, every other column is kept so
  callers may override defaults. Columns without a default that are not
  nullable are required.
- ``update``: the same columns, all optional, for partial updates. An explicit
  ``null`` is still rejected on non-null columns.
- ``response``: the full row as returned by a read.

Nothing here is written per entity; the rules come from the column types,
nullability and defaults declared on the table.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Annotated, Any, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, create_model
from sqlalchemy import JSON, Numeric, inspect
from sqlalchemy.types import TypeDecorator
from sqlmodel import SQLModel

from core.exceptions import RecordValidationError
from db.types import EnumString, JSONDocument, TextArray

SERVER_MANAGED = ("id", "created_at", "updated_at")

# Never serialised back to clients
SENSITIVE_COLUMNS = frozenset({"password", "verification_token", "reset_token"})

_MISSING = object()


@dataclass(frozen=True)
class ColumnSpec:
    """What the table declares about one column."""

    key: str
    name: str
    python_type: Any
    nullable: bool
    primary_key: bool = False
    unique: bool = False
    foreign_key: Optional[str] = None
    default: Any = _MISSING
    server_assigned_default: bool = False
    max_digits: Optional[int] = None
    decimal_places: Optional[int] = None

    @property
    def has_default(self) -> bool:
        return self.default is not _MISSING or self.server_assigned_default

    @property
    def required(self) -> bool:
        return not self.nullable and not self.has_default and not self.primary_key


def column_python_type(column_type: Any) -> Any:
    if isinstance(column_type, EnumString):
        return column_type.enum_class
    if isinstance(column_type, TextArray):
        return list[str]
    if isinstance(column_type, (JSON, JSONDocument)):
        return Any
    if isinstance(column_type, TypeDecorator):
        column_type = column_type.impl_instance
    if isinstance(column_type, Numeric):
        return Decimal
    return column_type.python_type


def describe_columns(table: type[SQLModel]) -> tuple[ColumnSpec, ...]:
    """Read the column declarations of a table model, in declaration order."""
    specs = []
    for attr in inspect(table).column_attrs:
        column = attr.columns[0]
        default = _MISSING
        server_assigned = column.server_default is not None
        if column.default is not None:
            if column.default.is_scalar:
                default = column.default.arg
            else:
                server_assigned = True
        foreign_key = next(iter(column.foreign_keys), None)
        specs.append(ColumnSpec(
            key=attr.key,
            name=column.name,
            python_type=column_python_type(column.type),
            nullable=bool(column.nullable),
            primary_key=column.primary_key,
            unique=bool(column.unique),
            foreign_key=foreign_key.target_fullname if foreign_key is not None else None,
            default=default,
            server_assigned_default=server_assigned,
            max_digits=getattr(column.type, "precision", None),
            decimal_places=getattr(column.type, "scale", None),
        ))
    return tuple(specs)


def _value_type(spec: ColumnSpec) -> Any:
    if spec.python_type is Decimal and spec.max_digits is not None:
        return Annotated[Decimal, Field(max_digits=spec.max_digits, decimal_places=spec.decimal_places)]
    if spec.python_type is str and spec.required:
        return Annotated[str, Field(min_length=1)]
    return spec.python_type


def _aliases(spec: ColumnSpec) -> dict[str, Any]:
    if spec.name == spec.key:
        return {}
    return {
        "validation_alias": AliasChoices(spec.name, spec.key),
        "serialization_alias": spec.name,
    }


def _create_field(spec: ColumnSpec) -> tuple[Any, Any]:
    annotation = _value_type(spec)
    if spec.nullable:
        annotation = Optional[annotation]
    if spec.required:
        return annotation, Field(..., **_aliases(spec))
    default = spec.default if spec.default is not _MISSING else None
    return annotation, Field(default=default, **_aliases(spec))


def _update_field(spec: ColumnSpec) -> tuple[Any, Any]:
    annotation = _value_type(spec)
    if spec.nullable:
        annotation = Optional[annotation]
    return annotation, Field(default=None, **_aliases(spec))


def _response_field(spec: ColumnSpec) -> tuple[Any, Any]:
    annotation = spec.python_type
    if spec.nullable or spec.primary_key:
        annotation = Optional[annotation]
    kwargs: dict[str, Any] = {}
    if spec.name != spec.key:
        kwargs["serialization_alias"] = spec.name
    if spec.key in SENSITIVE_COLUMNS:
        kwargs["exclude"] = True
    return annotation, Field(default=None, **kwargs)


def format_errors(exc: ValidationError) -> list[dict[str, Any]]:
    """Flatten pydantic errors into one entry per offending field."""
    errors = []
    for error in exc.errors():
        loc = error.get("loc") or ("__root__",)
        errors.append({
            "field": ".".join(str(part) for part in loc),
            "message": error["msg"],
            "type": error["type"],
        })
    return errors


@dataclass(frozen=True)
class EntitySchema:
    """Table model plus the schemas derived from it."""

    table: type[SQLModel]
    columns: tuple[ColumnSpec, ...]
    server_managed: frozenset[str]
    create: type[BaseModel]
    update: type[BaseModel]
    response: type[BaseModel]

    @property
    def name(self) -> str:
        return self.table.__tablename__

    @property
    def row_fields(self) -> tuple[str, ...]:
        return tuple(spec.key for spec in self.columns)

    @property
    def insert_fields(self) -> tuple[str, ...]:
        return tuple(spec.key for spec in self.columns if spec.key not in self.server_managed)

    @property
    def required_fields(self) -> tuple[str, ...]:
        return tuple(
            spec.key for spec in self.columns
            if spec.required and spec.key not in self.server_managed
        )

    @property
    def unique_fields(self) -> tuple[str, ...]:
        return tuple(spec.key for spec in self.columns if spec.unique)

    @property
    def foreign_keys(self) -> dict[str, str]:
        return {spec.key: spec.foreign_key for spec in self.columns if spec.foreign_key}

    def column(self, key: str) -> ColumnSpec:
        for spec in self.columns:
            if spec.key == key:
                return spec
        raise KeyError(f"{self.name} has no column {key!r}")

    def validate_create(self, payload: Mapping[str, Any]) -> BaseModel:
        """Validate untrusted input against the insertable projection.

        Raises ``RecordValidationError`` listing every offending field.
        """
        try:
            return self.create.model_validate(payload)
        except ValidationError as exc:
            raise RecordValidationError(self.name, format_errors(exc)) from exc

    def validate_update(self, payload: Mapping[str, Any]) -> BaseModel:
        try:
            return self.update.model_validate(payload)
        except ValidationError as exc:
            raise RecordValidationError(self.name, format_errors(exc)) from exc

    def build_row(self, data: BaseModel) -> SQLModel:
        """Turn validated input into a new row. Omitted fields take the column defaults."""
        return self.table(**data.model_dump(exclude_unset=True))

    def extract_insertable(self, row: SQLModel) -> BaseModel:
        """Project an existing row onto its insertable columns.

        Rows holding legacy values outside the column rules raise
        ``RecordValidationError``.
        """
        return self.validate_create({key: getattr(row, key) for key in self.insert_fields})

    def merge_server_fields(self, data: BaseModel, **server_values: Any) -> SQLModel:
        """Rebuild a full row from insertable data plus server-assigned values."""
        unknown = set(server_values) - self.server_managed
        if unknown:
            raise ValueError(f"Not server-managed on {self.name}: {sorted(unknown)}")
        return self.table(**data.model_dump(), **server_values)

    def to_response(self, row: SQLModel) -> BaseModel:
        return self.response.model_validate(row)


def derive_schemas(
    table: type[SQLModel],
    server_managed: Optional[tuple[str, ...]] = None,
) -> EntitySchema:
    """Build the create, update and response schemas of a table model."""
    columns = describe_columns(table)
    keys = {spec.key for spec in columns}
    managed = frozenset(key for key in (server_managed or SERVER_MANAGED) if key in keys)

    insertable = [spec for spec in columns if spec.key not in managed]
    base_name = table.__name__
    create = create_model(
        f"{base_name}Create",
        __config__=ConfigDict(extra="ignore"),
        **{spec.key: _create_field(spec) for spec in insertable},
    )
    update = create_model(
        f"{base_name}Update",
        __config__=ConfigDict(extra="ignore"),
        **{spec.key: _update_field(spec) for spec in insertable},
    )
    response = create_model(
        f"{base_name}Response",
        __config__=ConfigDict(from_attributes=True),
        **{spec.key: _response_field(spec) for spec in columns},
    )
    return EntitySchema(
        table=table,
        columns=columns,
        server_managed=managed,
        create=create,
        update=update,
        response=response,
    )
