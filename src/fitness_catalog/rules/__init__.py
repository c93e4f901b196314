"""Entity lifecycle rules."""

from .catalog import Catalog
from .config import ChildSpec, DependencySpec, EntityConfig, LinkSpec
from .engine import RuleEngine, deleted_name
from .entities import ENTITIES, get_entity_config
from .pagination import PageWindow, paginate
from .rating import fold_rating, validate_rating

__all__ = [
    "Catalog",
    "ChildSpec",
    "DependencySpec",
    "deleted_name",
    "ENTITIES",
    "EntityConfig",
    "fold_rating",
    "get_entity_config",
    "LinkSpec",
    "PageWindow",
    "paginate",
    "RuleEngine",
    "validate_rating",
]
