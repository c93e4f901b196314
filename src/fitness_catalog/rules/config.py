"""Configuration types describing how each entity type is stored and related."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EntityConfig:
    """Everything the rule engine needs to know about one entity type.

    Attributes:
        key: Pattern suffix, e.g. "training.plan" in "create.training.plan"
        label: Singular display name used in messages
        plural: Plural display name used in messages
        table: Backing table
        model: Dataclass with from_dict/to_dict
        columns: Writable scalar columns
        case_insensitive_names: Whether name uniqueness ignores case
        rateable: Whether the entity carries score/total_ratings
        links: Many-to-many relations owned by this entity
        child: Ordered sub-entity rows owned by this entity
        dependencies: Active rows that block a soft delete
        date_range: (start, end) columns where end may not precede start
    """

    key: str
    label: str
    plural: str
    table: str
    model: type
    columns: tuple[str, ...]
    case_insensitive_names: bool = False
    rateable: bool = True
    links: tuple["LinkSpec", ...] = ()
    child: "ChildSpec | None" = None
    dependencies: tuple["DependencySpec", ...] = ()
    date_range: tuple[str, str] | None = None


@dataclass(frozen=True)
class LinkSpec:
    """A many-to-many relation kept in a join table."""

    field: str  # payload key holding the id list
    attribute: str  # model attribute holding the loaded targets
    join_table: str
    owner_column: str
    target_column: str
    target: EntityConfig


@dataclass(frozen=True)
class ChildSpec:
    """Sub-entity rows owned by a parent, unique by a key column."""

    field: str
    attribute: str
    label: str
    table: str
    model: type
    parent_column: str
    columns: tuple[str, ...]
    key: str
    reference_column: str
    reference_attribute: str
    reference: EntityConfig


@dataclass(frozen=True)
class DependencySpec:
    """Rows that reference an entity, directly or through a join table.

    Set column for a direct foreign key, or join_table/owner_column/
    target_column for a many-to-many link owned by the dependent table.
    """

    label: str
    table: str
    column: str | None = None
    join_table: str | None = None
    owner_column: str | None = None
    target_column: str | None = None
